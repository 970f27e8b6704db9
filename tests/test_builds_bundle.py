"""Tests for builds/bundle.py module."""

import os
import stat

import pytest

from prodbuild.builds.bundle import (
    LAUNCHER_SCRIPT,
    SERVER_ENTRY,
    BundleError,
    copy_manifest,
    ensure_dist_dir,
    write_launcher,
)


class TestEnsureDistDir:
    """Tests for ensure_dist_dir function."""

    def test_creates_missing_directory(self, tmp_path):
        """Should create the directory when absent."""
        dist = tmp_path / "dist"
        assert ensure_dist_dir(dist) == dist
        assert dist.is_dir()

    def test_existing_directory_kept(self, tmp_path):
        """Should reuse an existing, non-empty directory."""
        dist = tmp_path / "dist"
        dist.mkdir()
        (dist / "keep.txt").write_text("keep")

        ensure_dist_dir(dist)

        assert (dist / "keep.txt").read_text() == "keep"

    def test_path_is_a_file(self, tmp_path):
        """Should raise when a file blocks the directory path."""
        dist = tmp_path / "dist"
        dist.write_text("not a directory")

        with pytest.raises(BundleError) as exc_info:
            ensure_dist_dir(dist)
        assert exc_info.value.code == "dist_dir_error"


class TestCopyManifest:
    """Tests for copy_manifest function."""

    def test_byte_identical_copy(self, tmp_path):
        """Should copy the manifest byte for byte."""
        manifest = tmp_path / "package.json"
        content = b'{\r\n  "name": "app",\n  "version": "1.0.0"\n}'
        manifest.write_bytes(content)
        dist = tmp_path / "dist"
        dist.mkdir()

        dest = copy_manifest(manifest, dist)

        assert dest == dist / "package.json"
        assert dest.read_bytes() == content

    def test_overwrites_existing_copy(self, tmp_path):
        """Should replace a stale manifest in the output directory."""
        manifest = tmp_path / "package.json"
        manifest.write_text('{"version": "2.0.0"}')
        dist = tmp_path / "dist"
        dist.mkdir()
        (dist / "package.json").write_text('{"version": "1.0.0"}')

        copy_manifest(manifest, dist)

        assert (dist / "package.json").read_text() == '{"version": "2.0.0"}'

    def test_missing_manifest(self, tmp_path):
        """Should raise manifest_missing when the source is absent."""
        dist = tmp_path / "dist"
        dist.mkdir()

        with pytest.raises(BundleError) as exc_info:
            copy_manifest(tmp_path / "package.json", dist)

        assert exc_info.value.code == "manifest_missing"
        assert not (dist / "package.json").exists()


class TestWriteLauncher:
    """Tests for write_launcher function."""

    def test_launcher_content(self, tmp_path):
        """Should write the fixed launcher script."""
        dest = write_launcher(tmp_path)

        assert dest == tmp_path / "start.js"
        assert dest.read_bytes() == (
            b"#!/usr/bin/env node\nrequire('./server/index.js');\n"
        )

    def test_launcher_references_server_entry(self):
        """Launcher should require the server entry relative to itself."""
        assert SERVER_ENTRY == "./server/index.js"
        assert LAUNCHER_SCRIPT.startswith("#!/usr/bin/env node\n")
        assert f"require('{SERVER_ENTRY}');" in LAUNCHER_SCRIPT

    def test_custom_name(self, tmp_path):
        """Should honor a custom launcher file name."""
        dest = write_launcher(tmp_path, "launch.js")
        assert dest.name == "launch.js"
        assert dest.read_text() == LAUNCHER_SCRIPT

    def test_overwrites_existing(self, tmp_path):
        """Should replace an edited launcher."""
        (tmp_path / "start.js").write_text("console.log('stale');\n")

        write_launcher(tmp_path)

        assert (tmp_path / "start.js").read_text() == LAUNCHER_SCRIPT

    @pytest.mark.skipif(os.name != "posix", reason="POSIX file modes only")
    def test_launcher_is_executable(self, tmp_path):
        """Should mark the launcher executable."""
        dest = write_launcher(tmp_path)
        assert dest.stat().st_mode & stat.S_IXUSR

    def test_missing_directory(self, tmp_path):
        """Should raise when the output directory does not exist."""
        with pytest.raises(BundleError) as exc_info:
            write_launcher(tmp_path / "missing")
        assert exc_info.value.code == "launcher_write_error"
