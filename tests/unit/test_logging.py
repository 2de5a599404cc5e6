"""Unit tests for logging helpers."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import numpy as np

from imgsharp.core.buffers import PixelBuffer
from imgsharp.core.sharpness import variance_sharpness
from imgsharp.utils.logging import configure_logging, get_logger, timed


class TestGetLogger:
    """Test get_logger function."""

    def test_namespaced(self):
        assert get_logger("convolution").name == "imgsharp.convolution"

    def test_package_names_unchanged(self):
        assert get_logger("imgsharp.core.sharpness").name == "imgsharp.core.sharpness"
        assert get_logger("imgsharp").name == "imgsharp"

    def test_configure_sets_level(self):
        root = configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("warning")
        assert root.level == logging.WARNING
        root.setLevel(logging.NOTSET)

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("IMGSHARP_LOG_LEVEL", "INFO")
        assert configure_logging().level == logging.INFO
        logging.getLogger("imgsharp").setLevel(logging.NOTSET)


class TestTimed:
    """Test the timed context manager."""

    def test_logs_duration(self, caplog):
        caplog.set_level(logging.DEBUG, logger="imgsharp")
        with timed("summing samples"):
            pass
        messages = [record.getMessage() for record in caplog.records]
        assert any(m.startswith("summing samples took ") and m.endswith(" seconds to execute")
                   for m in messages)

    def test_disabled_by_settings(self, caplog, monkeypatch):
        monkeypatch.setenv("IMGSHARP_LOG_TIMINGS", "false")
        caplog.set_level(logging.DEBUG, logger="imgsharp")
        with timed("summing samples"):
            pass
        assert not any("summing samples" in record.getMessage() for record in caplog.records)

    def test_logs_even_when_block_raises(self, caplog):
        caplog.set_level(logging.DEBUG, logger="imgsharp")
        try:
            with timed("failing block"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert any("failing block took" in record.getMessage() for record in caplog.records)

    def test_variance_sharpness_times_statistics(self, caplog):
        caplog.set_level(logging.DEBUG, logger="imgsharp")
        variance_sharpness(PixelBuffer(np.eye(4)))
        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "getting average of laplacian took" in messages
        assert "getting the variance of laplacian took" in messages


PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_python(code, **env_overrides):
    """Run ``code`` in a fresh interpreter with the project importable."""
    env = {**os.environ, "PYTHONPATH": str(PROJECT_ROOT), **env_overrides}
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=str(PROJECT_ROOT), env=env, capture_output=True, text=True, timeout=120,
    )


class TestImportSideEffects:
    """Importing the package must leave logging and settings to the host."""

    def test_package_logger_has_null_handler(self):
        package_logger = logging.getLogger("imgsharp")
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    def test_host_basic_config_still_applies(self):
        result = run_python(
            "import logging\n"
            "import numpy as np\n"
            "import imgsharp\n"
            "imgsharp.variance_sharpness(imgsharp.PixelBuffer(np.eye(3)))\n"
            "logging.basicConfig(level=logging.INFO, format='HOST %(message)s')\n"
            "root = logging.getLogger()\n"
            "print(root.level, len(root.handlers), root.handlers[0].formatter._fmt)\n"
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "20 1 HOST %(message)s"

    def test_import_with_invalid_environment(self):
        result = run_python(
            "import imgsharp\nprint('imported')",
            IMGSHARP_LOG_TIMINGS="on",
            IMGSHARP_LOG_LEVEL="LOUD",
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "imported"
