from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from kata_toolkit.core.errors import MalformedBracesError


def expand_braces(text: str, *, unique: bool = True) -> Iterator[str]:
    """Yield every expansion of the brace groups in ``text``.

    Groups are resolved innermost first, one group per step, breadth-first
    over the working queue. Output order follows the queue and is not part of
    the contract.

    With ``unique`` (default) a string reachable through several expansion
    paths is produced once. ``unique=False`` keeps one result per path.

    Raises MalformedBracesError on unbalanced braces.
    """

    check_balanced(text)

    queue: deque[str] = deque([text])
    seen: set[str] = {text}

    while queue:
        current = queue.popleft()
        span = find_innermost_group(current)
        if span is None:
            yield current
            continue

        start, end = span
        head, body, tail = current[:start], current[start + 1 : end], current[end + 1 :]
        for alternative in body.split(","):
            variant = f"{head}{alternative}{tail}"
            if unique:
                if variant in seen:
                    continue
                seen.add(variant)
            queue.append(variant)


def find_innermost_group(text: str) -> Optional[tuple[int, int]]:
    """Return (open, close) indexes of the first group to close, or None.

    The group is the first ``}`` paired with the most recent ``{`` before it,
    so it never contains another group.
    """
    opened: Optional[int] = None
    for i, ch in enumerate(text):
        if ch == "{":
            opened = i
        elif ch == "}" and opened is not None:
            return opened, i
    return None


def check_balanced(text: str) -> None:
    stack: list[int] = []
    for i, ch in enumerate(text):
        if ch == "{":
            stack.append(i)
        elif ch == "}":
            if not stack:
                raise MalformedBracesError(
                    code="E_UNBALANCED_BRACES",
                    message="closing brace without a matching opening brace",
                    path=f"text[{i}]",
                )
            stack.pop()
    if stack:
        raise MalformedBracesError(
            code="E_UNBALANCED_BRACES",
            message="opening brace is never closed",
            path=f"text[{stack[-1]}]",
        )
