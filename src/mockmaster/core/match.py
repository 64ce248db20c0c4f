"""
MockMaster Path Matching

Route patterns are plain strings made of '/'-separated segments:

- literal segments match themselves exactly (case-sensitive)
- ':name' segments capture one non-empty path segment
- '*' segments match one path segment, or, as the final segment,
  the whole remainder of the path including '/'

Examples:
    match_path('/users/:id', '/users/123')            # True
    extract_params('/users/:id', '/users/123')        # {'id': '123'}
    match_path('/api/*', '/api/v1/users/42')          # True
    match_path('/api/*/users', '/api/v1/v2/users')    # False
"""

import re
from functools import lru_cache
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass

# Segment kinds
LITERAL = 'literal'
PARAMETER = 'parameter'
WILDCARD = 'wildcard'

_PARAM_SEGMENT = re.compile(r'^:(\w+)(.*)$', re.DOTALL)


@dataclass(frozen=True)
class Segment:
    """One classified segment of a route pattern."""

    kind: str
    text: str
    name: Optional[str] = None
    suffix: str = ''
    greedy: bool = False


@dataclass(frozen=True)
class CompiledPattern:
    """
    Matchable form of a route pattern.

    Parameter values are captured by position and paired with
    `param_names` afterwards, so any parameter name (including repeated
    names or names starting with a digit) compiles.
    """

    pattern: str
    segments: Tuple[Segment, ...]
    regex: 're.Pattern'
    param_names: Tuple[str, ...]

    @property
    def has_params(self) -> bool:
        return bool(self.param_names)

    def matches(self, path: str) -> bool:
        """Check if the whole path matches this pattern."""
        return self.regex.fullmatch(path) is not None

    def params(self, path: str) -> Optional[Dict[str, str]]:
        """
        Extract parameter values from a path.

        Returns:
            Mapping of parameter name to captured value, or None if the
            path does not match
        """
        match = self.regex.fullmatch(path)
        if match is None:
            return None
        return dict(zip(self.param_names, match.groups()))


def classify_segments(pattern: str) -> Tuple[Segment, ...]:
    """
    Split a pattern on '/' and classify each segment.

    Args:
        pattern: Route pattern (e.g. '/users/:id/posts/*')

    Returns:
        Tuple of Segment in pattern order
    """
    parts = pattern.split('/')
    segments: List[Segment] = []

    for index, part in enumerate(parts):
        is_last = index == len(parts) - 1

        if part == '*':
            segments.append(Segment(kind=WILDCARD, text=part, greedy=is_last))
            continue

        param = _PARAM_SEGMENT.match(part)
        if param:
            segments.append(Segment(
                kind=PARAMETER,
                text=part,
                name=param.group(1),
                suffix=param.group(2)
            ))
            continue

        segments.append(Segment(kind=LITERAL, text=part))

    return tuple(segments)


def _segment_regex(segment: Segment) -> str:
    """Regex source for a single classified segment."""
    if segment.kind == WILDCARD:
        # Trailing wildcard swallows the rest of the path
        return '.*' if segment.greedy else '[^/]+'

    if segment.kind == PARAMETER:
        return '([^/]+)' + re.escape(segment.suffix)

    return re.escape(segment.text)


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Compile a route pattern into a matcher.

    Never fails: a string with no special segments compiles to an
    all-literal matcher.

    Args:
        pattern: Route pattern string

    Returns:
        CompiledPattern
    """
    segments = classify_segments(pattern)
    source = '/'.join(_segment_regex(segment) for segment in segments)
    param_names = tuple(s.name for s in segments if s.kind == PARAMETER)

    return CompiledPattern(
        pattern=pattern,
        segments=segments,
        regex=re.compile(source, re.DOTALL),
        param_names=param_names
    )


def is_pattern(pattern: str) -> bool:
    """Check if a pattern can match anything other than itself."""
    return ':' in pattern or '*' in pattern


def match_path(pattern: str, path: str) -> bool:
    """
    Match a concrete path against a route pattern.

    Args:
        pattern: Pattern to match against (e.g. '/users', '/users/:id', '/api/*')
        path: Actual request path

    Returns:
        True if the path matches the pattern
    """
    if pattern == path:
        return True

    # Plain strings only ever match themselves
    if not is_pattern(pattern):
        return False

    return compile_pattern(pattern).matches(path)


def extract_params(pattern: str, path: str) -> Dict[str, str]:
    """
    Extract named path parameters.

    Returns an empty dict when the pattern declares no ':' parameters or
    when the path does not match; use match_path() to tell those apart.

    Args:
        pattern: Pattern with ':name' placeholders
        path: Actual request path

    Returns:
        Dict of parameter name to value
    """
    if ':' not in pattern:
        return {}

    params = compile_pattern(pattern).params(path)
    return params or {}


# Alternative name for extract_params
parse_path_params = extract_params
