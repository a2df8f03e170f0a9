import importlib

mod = "typedocsharp"
class LazyLoader:
    """
    Lazy loader for the typedocsharp functions to speed up startup time.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, func_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, func_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the functions and their corresponding module paths
_mappings = {
    "resolve_type": (f"{mod}.typeresolver", "resolve_type"),
    "TypeResolver": (f"{mod}.typeresolver", "TypeResolver"),
    "TypedocConfig": (f"{mod}.config", "TypedocConfig"),
    "load_typedoc": (f"{mod}.typedoc", "load_typedoc"),
    "parse_typedoc": (f"{mod}.typedoc", "parse_typedoc"),
    "convert_declarations": (f"{mod}.declarations", "convert_declarations"),
    "convert_typedoc_to_csharp": (f"{mod}.tstocsharp", "convert_typedoc_to_csharp"),
    "convert_typedoc_schema_to_csharp": (f"{mod}.tstocsharp", "convert_typedoc_schema_to_csharp"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)
