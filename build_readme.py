#!/usr/bin/env python3
"""
MUST HAVE REQUIREMENTS:
- Accept an optional source html path and markdown target path (default index.html and README.md).
- Prefer the virtualenv python if present when running extract_body.py.
- Stop on extractor failure while printing its diagnostic; never truncate an existing target.
- Re-parse the extracted fragment with lxml and require exactly one body before writing.
- Replace the target atomically, keeping its file mode (umask default for a new target).
- Print the target path with its checksum on success.
- Do nothing on import; the build runs only when executed.
"""
import hashlib
import os
import subprocess
import sys
from tempfile import NamedTemporaryFile

from lxml import etree


# ----------------------------------
# Fragment must re-parse to a single body
# ----------------------------------
def holds_single_body(fragment):
    if not fragment:
        return False
    doc = etree.HTML(fragment, parser=etree.HTMLParser(encoding="utf-8"))
    return doc is not None and len(doc.findall(".//body")) == 1


# ----------------------------------
# Mode of the existing target, else what a shell redirect would create
# ----------------------------------
def target_mode(dst):
    try:
        return os.stat(dst).st_mode & 0o7777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) > 3:
        sys.exit(f"usage: {argv[0]} [html_file [markdown_file]]")
    src = argv[1] if len(argv) > 1 else "index.html"
    dst = argv[2] if len(argv) > 2 else "README.md"
    root = os.path.dirname(os.path.abspath(__file__))
    venv_py = os.path.join(root, ".venv", "bin", "python3")
    python = venv_py if os.path.exists(venv_py) else sys.executable

    # ----------------------------------
    # Run the extractor; its stdout is the new target content
    # ----------------------------------
    proc = subprocess.run(
        [python, os.path.join(root, "extract_body.py"), src], capture_output=True
    )
    if proc.returncode:
        sys.stderr.write(proc.stderr.decode("utf-8", "replace"))
        sys.exit(proc.returncode)
    fragment = proc.stdout

    # extract_body.py already enforces this; re-checked before replacing the target
    if not holds_single_body(fragment):
        sys.exit("error: extracted fragment does not hold a single <body>")

    # ----------------------------------
    # Swap the target in place
    # ----------------------------------
    tmp = None
    try:
        mode = target_mode(dst)
        with NamedTemporaryFile(
            dir=os.path.dirname(os.path.abspath(dst)), prefix=".readme-", delete=False
        ) as tmp:
            tmp.write(fragment)
        os.chmod(tmp.name, mode)
        os.replace(tmp.name, dst)
    except OSError as exc:
        if tmp is not None and os.path.exists(tmp.name):
            os.unlink(tmp.name)
        sys.exit(f"error: cannot write {dst}: {exc}")

    with open(dst, "rb") as f:
        checksum = hashlib.sha256(f.read()).hexdigest()
    print(f"{dst} {checksum}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
