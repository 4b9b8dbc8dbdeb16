import logging

from core.logging_config import setup_logging


def test_setup_logging_configures_root_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    # start from a bare root logger; monkeypatch restores the originals
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    logfile = tmp_path / "geofence.log"
    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        # a second call must not stack more handlers
        setup_logging("error")
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("geofence.test").info("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in logfile.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            h.close()


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    setup_logging("not-a-level")
    assert root.level == logging.INFO
