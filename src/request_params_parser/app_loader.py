"""
ASGI application loader for the CLI.

Imports an application module from a file or package path and reads the
params parser configuration out of its middleware list.
"""

import importlib
import importlib.util
import sys
from pathlib import Path
from typing import Any, Optional

from request_params_parser.config import ParserConfig


class AppLoaderError(Exception):
    """Error while loading an application."""
    pass


class AppLoader:
    """
    Load an ASGI application by path.

    The application's directory is put on sys.path for the duration of
    the import so that its own absolute imports resolve.
    """

    def __init__(
        self,
        app_path: Path,
        app_variable: str = "app",
        module_name: Optional[str] = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            app_path: Path to the application file or package directory.
            app_variable: Name of the application variable (default: "app").
            module_name: Optional module name to import. If not provided,
                        it is derived from app_path.
        """
        self.app_path = app_path.resolve()
        self.app_variable = app_variable
        self.module_name = module_name
        self._app: Any = None

    def load(self) -> Any:
        """
        Import the module and return the application object.

        Raises:
            AppLoaderError: If the module can't be imported or has no such variable.
        """
        if self._app is not None:
            return self._app

        original_sys_path = sys.path.copy()
        search_dir = self.app_path.parent
        if str(search_dir) not in sys.path:
            sys.path.insert(0, str(search_dir))

        try:
            if self.app_path.is_file():
                module_name = self.module_name or self.app_path.stem
                spec = importlib.util.spec_from_file_location(module_name, self.app_path)
                if spec is None or spec.loader is None:
                    raise AppLoaderError(f"Could not create module spec for {self.app_path}")
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            else:
                module = importlib.import_module(self.module_name or self.app_path.name)
        except AppLoaderError:
            raise
        except Exception as e:
            raise AppLoaderError(f"Failed to import {self.app_path}: {e}") from e
        finally:
            sys.path = original_sys_path

        if not hasattr(module, self.app_variable):
            raise AppLoaderError(
                f"Module does not have '{self.app_variable}' attribute"
            )

        self._app = getattr(module, self.app_variable)
        return self._app


def find_parser_config(app: Any) -> Optional[ParserConfig]:
    """
    Read the params parser configuration registered on an application.

    Args:
        app: A Starlette or FastAPI application.

    Returns:
        The configuration passed to the parser middleware, or None when
        the application does not use it.
    """
    from request_params_parser.middleware.params_parser import RequestParamsParser

    for entry in getattr(app, "user_middleware", []):
        cls = getattr(entry, "cls", None)
        if not (isinstance(cls, type) and issubclass(cls, RequestParamsParser)):
            continue
        options = dict(getattr(entry, "kwargs", None) or getattr(entry, "options", None) or {})
        config = options.pop("config", None)
        if config is None:
            return ParserConfig(**options)
        if options:
            return config.model_copy(update=options)
        return config
    return None
