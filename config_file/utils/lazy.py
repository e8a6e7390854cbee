import importlib
import importlib.util
from types import ModuleType
from typing import Any


class LazyImporter(ModuleType):
    """
    Proxy for a module that is only imported when one of its attributes is used.

    Decoders for optional formats depend on libraries that may not be installed.
    Binding the library through this proxy keeps ``import config_file`` working
    without them; an ImportError surfaces only if a disabled decoder is used
    anyway.

    Usage::
        >>> from config_file.utils.lazy import LazyImporter
        >>> yaml = LazyImporter("yaml")
        >>> yaml.safe_load("a: 1")  # PyYAML is imported here
        {'a': 1}
    """

    def __init__(self, module_name: str):
        super().__init__(module_name)
        self._module = None
        self._module_name = module_name

    def __getattr__(self, name: str) -> Any:
        if self._module is None:
            self._module = importlib.import_module(self._module_name)

        return getattr(self._module, name)

    def __dir__(self):
        if self._module is None:
            self._module = importlib.import_module(self._module_name)

        return dir(self._module)

    def __reduce__(self):
        return (self.__class__, (self._module_name,))


def is_available(module_name: str) -> bool:
    """Return True if *module_name* can be imported, without importing it."""
    try:
        return importlib.util.find_spec(module_name) is not None
    except (ImportError, ValueError):
        return False


yaml = LazyImporter("yaml")
xmltodict = LazyImporter("xmltodict")
