from underbar.plugins.interfaces import AdapterPlugin, Eachable, ElementIterator
from underbar.plugins.loader import adapt_with_plugins, load_adapter_plugins

__all__ = ["AdapterPlugin", "Eachable", "ElementIterator", "adapt_with_plugins", "load_adapter_plugins"]
