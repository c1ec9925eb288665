"""Shell pattern helpers shared by filesystem implementations."""


def _find_closing_brace(pattern: str, start: int) -> int:
    depth = 0
    for index in range(start, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _split_alternatives(body: str) -> list[str]:
    """Split the inside of a brace group on top-level commas."""
    alternatives: list[str] = []
    depth = 0
    current = ""
    for char in body:
        if char == "," and depth == 0:
            alternatives.append(current)
            current = ""
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        current += char
    alternatives.append(current)
    return alternatives


def expand_braces(pattern: str) -> list[str]:
    """Expand csh-style brace alternatives in a pattern.

    Groups without a top-level comma and unbalanced braces are kept literally,
    matching glob(3) with GLOB_BRACE.

    Examples:
        >>> expand_braces("src/{a,b}/*.py")
        ['src/a/*.py', 'src/b/*.py']
        >>> expand_braces("{x,y{1,2}}")
        ['x', 'y1', 'y2']
        >>> expand_braces("{}")
        ['{}']
    """
    start = pattern.find("{")
    while start != -1:
        end = _find_closing_brace(pattern, start)
        if end == -1:
            return [pattern]

        alternatives = _split_alternatives(pattern[start + 1 : end])
        if len(alternatives) > 1:
            prefix = pattern[:start]
            suffix = pattern[end + 1 :]
            expanded: list[str] = []
            for alternative in alternatives:
                expanded.extend(expand_braces(prefix + alternative + suffix))
            return expanded

        start = pattern.find("{", start + 1)

    return [pattern]
