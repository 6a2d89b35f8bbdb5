"""Core analysis and script generation functionality."""

from ore.core.analyzer import (
    DEFAULT_MAX_FILE_SIZE,
    AssetAnalyzer,
    analyze_directory,
    read_file_content,
)
from ore.core.classifier import determine_file_type
from ore.core.extractor import (
    HeuristicFunctionExtractor,
    extract_functions,
    extract_functions_from_file,
)
from ore.core.frida import (
    INVALID_FUNCTION_MARKER,
    build_custom_script,
    generate_custom_script,
    get_frida_script,
    get_frida_scripts,
)

__all__ = [
    "DEFAULT_MAX_FILE_SIZE",
    "INVALID_FUNCTION_MARKER",
    "AssetAnalyzer",
    "HeuristicFunctionExtractor",
    "analyze_directory",
    "build_custom_script",
    "determine_file_type",
    "extract_functions",
    "extract_functions_from_file",
    "generate_custom_script",
    "get_frida_script",
    "get_frida_scripts",
    "read_file_content",
]
