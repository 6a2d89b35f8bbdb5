"""Frida script catalog and custom hook script generation."""

import re
from typing import Final

from ore.exceptions import InvalidTargetError, ScriptNotFoundError
from ore.models.frida import FridaScript

INVALID_FUNCTION_MARKER: Final[str] = "// Error: Invalid function name provided"

_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")

_HOOK_ALL_FUNCTIONS = """
// Frida script to hook all functions in target application
(function() {
    console.log("[*] Starting function hooking...");

    // Get all global functions
    var functions = Object.getOwnPropertyNames(window);

    functions.forEach(function(name) {
        try {
            if (typeof window[name] === 'function') {
                var originalFn = window[name];
                window[name] = function() {
                    console.log("[CALL] " + name + " called with args:", arguments);
                    var result = originalFn.apply(this, arguments);
                    console.log("[RETURN] " + name + " returned:", result);
                    return result;
                };
            }
        } catch(e) {
            // Skip errors for properties that can't be redefined
        }
    });

    console.log("[*] Hooked " + functions.length + " properties");
})();
"""

_MONITOR_FILE_SYSTEM = """
// Frida script to monitor file system operations in Electron/Node.js
// This hooks the Node.js fs module methods instead of native functions

// Hook fs.readFile
if (typeof require !== 'undefined') {
    try {
        var fs = require('fs');
        if (fs && fs.readFile) {
            var originalReadFile = fs.readFile;
            fs.readFile = function(path, options, callback) {
                console.log("[FS] Reading file:", path);
                if (typeof options === 'function') {
                    callback = options;
                    options = undefined;
                }
                return originalReadFile.call(this, path, options, function(err, data) {
                    if (err) {
                        console.log("[FS] Failed to read:", path, "Error:", err.message);
                    } else {
                        console.log("[FS] Successfully read:", path, "Size:", data.length);
                    }
                    if (callback) callback(err, data);
                });
            };
        }

        // Hook fs.writeFile
        if (fs && fs.writeFile) {
            var originalWriteFile = fs.writeFile;
            fs.writeFile = function(path, data, options, callback) {
                console.log("[FS] Writing file:", path, "Size:", data.length);
                if (typeof options === 'function') {
                    callback = options;
                    options = undefined;
                }
                return originalWriteFile.call(this, path, data, options, function(err) {
                    if (err) {
                        console.log("[FS] Failed to write:", path, "Error:", err.message);
                    } else {
                        console.log("[FS] Successfully wrote:", path);
                    }
                    if (callback) callback(err);
                });
            };
        }

        console.log("[*] File system monitoring enabled");
    } catch(e) {
        console.log("[!] Failed to hook fs module:", e.message);
    }
} else {
    console.log("[!] require() not available, cannot hook fs module");
}
"""

_TRACE_PLUGIN_API = """
// Frida script to trace plugin API (Electron app)
(function() {
    console.log("[*] Tracing Plugin API...");

    // Hook the Plugin class if it exists
    if (typeof Plugin !== 'undefined') {
        var originalLoad = Plugin.prototype.onload;
        Plugin.prototype.onload = function() {
            console.log("[PLUGIN] Plugin loaded:", this.manifest.id);
            return originalLoad.apply(this, arguments);
        };

        var originalUnload = Plugin.prototype.onunload;
        Plugin.prototype.onunload = function() {
            console.log("[PLUGIN] Plugin unloaded:", this.manifest.id);
            return originalUnload.apply(this, arguments);
        };
    }

    // Hook the App class methods
    if (typeof App !== 'undefined') {
        console.log("[*] Found App class, hooking methods...");
        var appMethods = Object.getOwnPropertyNames(App.prototype);
        appMethods.forEach(function(method) {
            if (typeof App.prototype[method] === 'function') {
                var original = App.prototype[method];
                App.prototype[method] = function() {
                    console.log("[APP] " + method + " called");
                    return original.apply(this, arguments);
                };
            }
        });
    }
})();
"""

_EXTRACT_API_ENDPOINTS = """
// Frida script to extract API endpoints
(function() {
    // Hook XMLHttpRequest
    var originalOpen = XMLHttpRequest.prototype.open;
    XMLHttpRequest.prototype.open = function(method, url) {
        console.log("[API] XHR " + method + " " + url);
        return originalOpen.apply(this, arguments);
    };

    // Hook fetch
    var originalFetch = window.fetch;
    window.fetch = function() {
        var url = arguments[0];
        console.log("[API] fetch " + url);
        return originalFetch.apply(this, arguments).then(function(response) {
            console.log("[API] Response status: " + response.status);
            return response;
        });
    };

    console.log("[*] API endpoint monitoring enabled");
})();
"""

_MEMORY_DUMP = """
// Frida script to dump memory regions
Process.enumerateModules().forEach(function(module) {
    console.log("[MODULE] " + module.name + " @ " + module.base);

    module.enumerateExports().forEach(function(exp) {
        if (exp.type === 'function') {
            console.log("  [EXPORT] " + exp.name + " @ " + exp.address);
        }
    });
});

// Dump memory regions
Process.enumerateRanges('r--').forEach(function(range) {
    console.log("[MEMORY] " + range.base + " - " +
                range.base.add(range.size) +
                " (size: " + range.size + ")");
});
"""

FRIDA_SCRIPTS: Final[tuple[FridaScript, ...]] = (
    FridaScript(
        name="Hook All Functions",
        description="Hooks all JavaScript functions and logs their calls",
        script=_HOOK_ALL_FUNCTIONS,
    ),
    FridaScript(
        name="Monitor File System Access",
        description=(
            "Monitors file system operations in target application (Node.js fs module)"
        ),
        script=_MONITOR_FILE_SYSTEM,
    ),
    FridaScript(
        name="Trace Plugin API",
        description="Traces plugin API calls in target application",
        script=_TRACE_PLUGIN_API,
    ),
    FridaScript(
        name="Extract API Endpoints",
        description="Captures network requests and API endpoints",
        script=_EXTRACT_API_ENDPOINTS,
    ),
    FridaScript(
        name="Memory Dump",
        description="Dumps memory regions for analysis",
        script=_MEMORY_DUMP,
    ),
)

# {name} is the only placeholder; literal JS braces are doubled
_CUSTOM_SCRIPT_TEMPLATE = """
// Custom Frida script for function: {name}
// Note: This script attempts to hook the function by name
// For minified code, you may need to use function addresses instead

// Try to find and hook the function in the global scope
if (typeof {name} !== 'undefined') {{
    console.log("[*] Found function: {name}");
    var original_{name} = {name};
    {name} = function() {{
        console.log("[CALL] {name} called with " + arguments.length + " argument(s)");
        for (var i = 0; i < arguments.length; i++) {{
            console.log("    arg" + i + ":", arguments[i]);
        }}
        var result = original_{name}.apply(this, arguments);
        console.log("[RETURN] {name} returned:", result);
        return result;
    }};
}} else {{
    console.log("[!] Function {name} not found in global scope");
    console.log("[!] The function may be in a closure or require a different approach");
}}
"""


def get_frida_scripts() -> list[FridaScript]:
    """Get pre-built Frida scripts for common reverse engineering tasks."""
    return list(FRIDA_SCRIPTS)


def get_frida_script(name: str) -> FridaScript:
    """Look up a catalog script by name.

    Exact matches win; otherwise the name is compared case-insensitively.

    Raises:
        ScriptNotFoundError: If no script has that name.
    """
    for script in FRIDA_SCRIPTS:
        if script.name == name:
            return script

    folded = name.casefold()
    for script in FRIDA_SCRIPTS:
        if script.name.casefold() == folded:
            return script

    raise ScriptNotFoundError(name, [s.name for s in FRIDA_SCRIPTS])


def sanitize_identifier(text: str) -> str:
    """Keep only JavaScript identifier characters (letters, digits, '_', '$')."""
    return _NON_IDENTIFIER_CHARS.sub("", text)


def generate_custom_script(target_function: str) -> str:
    """Generate a Frida script that hooks a global function by name.

    The name is sanitized first so that nothing but identifier characters
    reaches the script text.

    Args:
        target_function: Untrusted function name.

    Returns:
        Script text, or INVALID_FUNCTION_MARKER if no identifier
        characters remain after sanitizing.
    """
    sanitized = sanitize_identifier(target_function)
    if not sanitized:
        return INVALID_FUNCTION_MARKER
    return _CUSTOM_SCRIPT_TEMPLATE.format(name=sanitized)


def build_custom_script(target_function: str) -> FridaScript:
    """Generate a custom hook script wrapped as a named catalog-style entry.

    Raises:
        InvalidTargetError: If no identifier characters remain after sanitizing.
    """
    sanitized = sanitize_identifier(target_function)
    if not sanitized:
        raise InvalidTargetError(target_function)
    return FridaScript(
        name=f"Custom: {sanitized}",
        description=f"Custom script for function {sanitized}",
        script=generate_custom_script(sanitized),
    )
