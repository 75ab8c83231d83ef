"""
qtcmd.tags - Tag list parsing for the push command

Turns a ``--tags`` value such as ``Qiita,Ruby[1.8,1.9]`` into the tag
objects the Qiita API expects.
"""

import re
from typing import Dict, List, Optional, Union

TAG_PATTERN = re.compile(r"^(?P<name>[^\[\]]+?)\s*(?:\[(?P<versions>[^\[\]]*)\])?$")

Tag = Dict[str, Union[str, List[str]]]


def split_tags(value: str) -> List[str]:
    """Split on commas that are not inside [...] version lists"""
    segments = []
    current = []
    depth = 0

    for char in value:
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        elif char == "," and depth == 0:
            segments.append("".join(current))
            current = []
            continue
        current.append(char)
    segments.append("".join(current))

    return [segment.strip() for segment in segments if segment.strip()]


def parse_tag(segment: str) -> Tag:
    """Parse one ``Name`` or ``Name[v1,v2]`` segment"""
    match = TAG_PATTERN.match(segment)
    if not match:
        # Unbalanced brackets, keep the raw text as the tag name
        return {"name": segment}

    tag: Tag = {"name": match.group("name").strip()}
    versions = match.group("versions")
    if versions is not None:
        tag["versions"] = [v.strip() for v in versions.split(",") if v.strip()]
    return tag


def parse_tags(value: Optional[str]) -> List[Tag]:
    """
    Parse a comma separated tag list

    Args:
        value: Raw --tags value, None when the option was not given

    Returns:
        List of {"name": ...} dicts, with "versions" when given in brackets
    """
    if not value:
        return []
    return [parse_tag(segment) for segment in split_tags(value)]
