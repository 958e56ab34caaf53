"""
Unit tests for the application loader.
"""

from pathlib import Path

import pytest
from starlette.applications import Starlette
from starlette.middleware import Middleware

from request_params_parser.app_loader import AppLoader, AppLoaderError, find_parser_config
from request_params_parser.config import ParserConfig
from request_params_parser.middleware.params_parser import RequestParamsParser


class TestAppLoader:
    """Tests for AppLoader."""

    def test_load_file(self, examples_path: Path) -> None:
        """Test loading an application from a file."""
        app = AppLoader(examples_path / "params_app" / "params_app.py").load()

        assert app.title == "Request Params Parser Example"

    def test_load_cached(self, examples_path: Path) -> None:
        """Test that the application is imported once per loader."""
        loader = AppLoader(examples_path / "misordered_app" / "misordered_app.py")

        assert loader.load() is loader.load()

    def test_missing_variable(self, tmp_path: Path) -> None:
        """Test an unknown application variable."""
        app_file = tmp_path / "empty_app.py"
        app_file.write_text("x = 1\n")

        with pytest.raises(AppLoaderError, match="'app'"):
            AppLoader(app_file).load()

    def test_import_error(self, tmp_path: Path) -> None:
        """Test a module that fails to import."""
        app_file = tmp_path / "broken_app.py"
        app_file.write_text("import not_a_real_module_xyz\n")

        with pytest.raises(AppLoaderError, match="Failed to import"):
            AppLoader(app_file).load()

    def test_sys_path_restored(self, tmp_path: Path) -> None:
        """Test that sys.path is left as it was."""
        import sys

        app_file = tmp_path / "tiny_app.py"
        app_file.write_text("app = object()\n")
        before = list(sys.path)

        AppLoader(app_file).load()

        assert sys.path == before


class TestFindParserConfig:
    """Tests for find_parser_config."""

    def test_config_option(self) -> None:
        """Test reading the config passed to the middleware."""
        config = ParserConfig(api_version="1.0")
        app = Starlette(middleware=[Middleware(RequestParamsParser, config=config)])

        assert find_parser_config(app) is config

    def test_field_options(self) -> None:
        """Test building a config from plain middleware options."""
        app = Starlette(middleware=[Middleware(RequestParamsParser, api_version="2.0")])

        found = find_parser_config(app)

        assert found is not None
        assert found.api_version == "2.0"

    def test_without_parser(self) -> None:
        """Test an application without the parser."""
        assert find_parser_config(Starlette()) is None
