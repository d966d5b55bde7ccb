#!/usr/bin/env python3
"""
MUST HAVE REQUIREMENTS:
- Take exactly one argument, the html file path; otherwise print usage before touching any file.
- Parse leniently without injecting html/head/body wrappers the source does not contain.
- Fail unless the document holds exactly one body element (nested or sibling bodies count).
- Serialize the body element with its attributes and full subtree and write it to stdout unframed.
- Report every failure as a single line on stderr with a non-zero exit and nothing on stdout.
"""
# ----------------------------------
# Extract the <body> element of an html file
# ----------------------------------
import sys

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup


class ExtractError(Exception):
    pass


class UsageError(ExtractError):
    pass


class LoadError(ExtractError):
    pass


class CardinalityError(ExtractError):
    pass


class SerializationError(ExtractError):
    pass


# ----------------------------------
# Stages: load -> find body -> serialize
# ----------------------------------
def load(path):
    try:
        with open(path, "rb") as f:
            data = f.read()
        return BeautifulSoup(data, "html.parser")
    except (OSError, ParserRejectedMarkup) as exc:
        raise LoadError(f"error: cannot open/load html file: {path}") from exc


def find_body(soup, path):
    bodies = soup.find_all("body")
    if len(bodies) != 1:
        raise CardinalityError(f"error: zero or more than one <body> tags in {path}")
    return bodies[0]


def serialize(body):
    try:
        return body.decode()
    except Exception as exc:
        raise SerializationError("error: cannot output html body content") from exc


def extract(path):
    return serialize(find_body(load(path), path))


# ----------------------------------
# Command line entry
# ----------------------------------
def main(argv=None):
    argv = sys.argv if argv is None else argv
    try:
        if len(argv) != 2:
            raise UsageError(f"usage: {argv[0] if argv else 'extract_body.py'} <html_file>")
        html = extract(argv[1])
    except ExtractError as exc:
        sys.exit(str(exc))
    sys.stdout.buffer.write(html.encode("utf-8"))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
