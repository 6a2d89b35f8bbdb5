"""Heuristic function and method name extraction from JavaScript/TypeScript."""

import os
import re
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Final

from ore.core.analyzer import DEFAULT_MAX_FILE_SIZE, read_file_content
from ore.models.analyze import AssetInfo

# Extensions whose contents are worth scanning for function names
SCRIPT_EXTENSIONS: Final[frozenset[str]] = frozenset({"js", "ts", "jsx", "tsx"})

JS_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "if", "else", "for", "while", "do", "switch", "case", "break", "continue",
        "return", "try", "catch", "finally", "throw", "new", "delete", "typeof",
        "instanceof", "void", "this", "super", "class", "extends", "implements",
        "interface", "enum", "type", "declare", "namespace", "module", "import",
        "export", "default", "async", "await", "yield", "get", "set", "static",
        "public", "private", "protected", "readonly", "abstract",
    }
)  # fmt: skip

_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"


class FunctionExtractor(ABC):
    """Strategy interface for recovering function names from source text."""

    @abstractmethod
    def extract(self, code: str) -> list[str]:
        """Return sorted, duplicate-free function names found in ``code``."""


class HeuristicFunctionExtractor(FunctionExtractor):
    """Lexical pattern scan; not a parser.

    False positives (e.g. a call followed by a block) and misses
    (e.g. names split across comments) are expected.
    """

    PATTERNS: MappingProxyType[str, re.Pattern[str]] = MappingProxyType(
        {
            # function name(
            "declaration": re.compile(rf"\bfunction\s+({_IDENT})\s*\("),
            # const name = (...) =>
            "arrow": re.compile(
                rf"(?:const|let|var)\s+({_IDENT})\s*=\s*(?:async\s+)?\([^)]*\)\s*=>"
            ),
            # name(...) { at line start or after an opening brace
            "method": re.compile(
                rf"(?:\A|\n|\{{)\s*(?:async\s+)?({_IDENT})\s*\([^)]*\)\s*\{{"
            ),
        }
    )

    def __init__(self, keywords: frozenset[str] = JS_KEYWORDS):
        self.keywords = keywords

    def _scan(self, pattern: re.Pattern[str], code: str) -> set[str]:
        return {
            match.group(1)
            for match in pattern.finditer(code)
            if match.group(1) not in self.keywords
        }

    def extract(self, code: str) -> list[str]:
        names: set[str] = set()
        for pattern in self.PATTERNS.values():
            names |= self._scan(pattern, code)
        return sorted(names)


_default_extractor = HeuristicFunctionExtractor()


def extract_functions(code: str) -> list[str]:
    """Extract JavaScript/TypeScript function names from code.

    Args:
        code: Source text, not validated as JavaScript.

    Returns:
        Sorted list of unique probable function and method names.
    """
    return _default_extractor.extract(code)


def extract_functions_from_file(
    path: str | os.PathLike[str],
    max_size: int = DEFAULT_MAX_FILE_SIZE,
) -> list[str]:
    """Read a source file and extract function names from it.

    Raises:
        AnalysisError: Any error from ``read_file_content``.
    """
    return extract_functions(read_file_content(path, max_size))


def is_script_asset(asset: AssetInfo) -> bool:
    """Check if an asset is JavaScript/TypeScript source."""
    return asset.extension in SCRIPT_EXTENSIONS
