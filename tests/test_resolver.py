import os
import stat

import pytest

from movefmt_cli.core.resolver import resolve_movefmt_path
from movefmt_cli.errors import ToolNotFoundError
from movefmt_cli.models.config import Config


def _make_exe(path):
	path.write_text("#!/bin/sh\n", encoding="utf-8")
	path.chmod(path.stat().st_mode | stat.S_IXUSR)
	return path


@pytest.fixture
def empty_dirs(tmp_path, monkeypatch):
	"""Point the install dir and PATH at empty directories."""
	install = tmp_path / "install"
	bin_dir = tmp_path / "bin"
	install.mkdir()
	bin_dir.mkdir()
	monkeypatch.delenv("MOVEFMT_EXE", raising=False)
	monkeypatch.setenv("PATH", str(bin_dir))
	return install, bin_dir


def test_explicit_exe_wins(tmp_path, empty_dirs):
	install, _ = empty_dirs
	_make_exe(install / Config().executable_name)
	explicit = _make_exe(tmp_path / "custom-movefmt")
	cfg = Config(MOVEFMT_EXE=str(explicit), MOVEFMT_INSTALL_DIR=str(install))
	assert resolve_movefmt_path(cfg) == explicit.resolve()


def test_explicit_exe_missing_raises(tmp_path, empty_dirs):
	cfg = Config(MOVEFMT_EXE=str(tmp_path / "nope"))
	with pytest.raises(ToolNotFoundError, match="MOVEFMT_EXE"):
		resolve_movefmt_path(cfg)


def test_install_dir_used(empty_dirs):
	install, _ = empty_dirs
	exe = _make_exe(install / Config().executable_name)
	cfg = Config(MOVEFMT_INSTALL_DIR=str(install))
	assert resolve_movefmt_path(cfg) == exe.resolve()


@pytest.mark.skipif(os.name == "nt", reason="PATH lookup needs exec bit")
def test_path_lookup(empty_dirs):
	install, bin_dir = empty_dirs
	exe = _make_exe(bin_dir / "movefmt")
	cfg = Config(MOVEFMT_INSTALL_DIR=str(install))
	assert resolve_movefmt_path(cfg) == exe.resolve()


def test_not_found_raises(empty_dirs):
	install, _ = empty_dirs
	cfg = Config(MOVEFMT_INSTALL_DIR=str(install))
	with pytest.raises(ToolNotFoundError, match="Cannot locate"):
		resolve_movefmt_path(cfg)
