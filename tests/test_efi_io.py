"""
Test per utilità I/O, logger e configurazione
"""

import logging

import pytest

from config import EFI_CONSTANTS, EFI_PATHS, get_log_level
from config.efi_config import EFIPaths
from efi import Guid
from utils import EFIFileHandler, EFILogger, format_certificate_info, get_certificate_common_name


class TestEFIFileHandler:
    def test_load_certificate_der_from_pem(self, data_dir, pk_der):
        assert EFIFileHandler.load_certificate_der(data_dir / "PK.crt") == pk_der

    def test_load_certificate_der_from_der(self, data_dir, pk_der):
        assert EFIFileHandler.load_certificate_der(data_dir / "PK.der") == pk_der

    def test_load_certificate_not_a_certificate(self, tmp_path):
        path = tmp_path / "junk.crt"
        path.write_bytes(b"junk")
        assert EFIFileHandler.load_certificate_der(path) is None

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            EFIFileHandler.load_certificate_der(tmp_path / "missing.crt")

    def test_write_and_read_signature_list(self, tmp_path, pk_esl):
        path = tmp_path / "nested" / "dir" / "PK.esl"
        EFIFileHandler.write_signature_list(path, pk_esl)
        assert EFIFileHandler.load_signature_list(path) == pk_esl

    def test_write_in_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        EFIFileHandler.save_binary_file(b"\x01\x02", "out.esl")
        assert (tmp_path / "out.esl").read_bytes() == b"\x01\x02"


class TestCertUtils:
    def test_common_name(self, make_certificate):
        assert get_certificate_common_name(make_certificate("Platform Key")) == "Platform Key"

    def test_format_certificate_info(self, make_certificate):
        info = format_certificate_info(make_certificate("Platform Key"))
        assert "Subject: CN=Platform Key" in info
        assert "SHA-256: " in info


class TestEFILogger:
    def test_cached(self):
        assert EFILogger.get_logger("efi_test") is EFILogger.get_logger("efi_test")

    def test_file_output(self, tmp_path):
        logger = EFILogger.get_logger("efi_file_test", log_dir=tmp_path, console_output=False)
        logger.info("hello esl")
        for handler in logger.handlers:
            handler.flush()
        assert "hello esl" in (tmp_path / "efi_file_test.log").read_text(encoding="utf-8")

    def test_set_level(self):
        logger = EFILogger.get_logger("efi_level_test")
        EFILogger.set_level("efi_level_test", logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in logger.handlers)

    def test_console_format(self, capsys):
        EFILogger.get_logger("efi_console_test").warning("careful")
        out = capsys.readouterr().out
        assert "[efi_console_test] [WARNING] careful" in out

    def test_level_defaults_from_env(self, monkeypatch):
        monkeypatch.setenv("EFI_LOG_LEVEL", "DEBUG")
        assert EFILogger.get_logger("efi_env_test").level == logging.DEBUG

    def test_log_to_file_uses_default_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr("utils.logger.EFI_PATHS", EFIPaths(LOGS=tmp_path / "default"))
        logger = EFILogger.get_logger("efi_default_dir", console_output=False, log_to_file=True)
        logger.warning("to default dir")
        assert "to default dir" in (tmp_path / "default" / "efi_default_dir.log").read_text(encoding="utf-8")

    def test_explicit_log_dir_wins(self, tmp_path, monkeypatch):
        monkeypatch.setattr("utils.logger.EFI_PATHS", EFIPaths(LOGS=tmp_path / "default"))
        EFILogger.get_logger("efi_dir_test", log_dir=tmp_path / "mine", log_to_file=True).warning("x")
        assert (tmp_path / "mine" / "efi_dir_test.log").exists()
        assert not (tmp_path / "default").exists()

    def test_same_settings_keep_handlers(self, tmp_path):
        first = EFILogger.get_logger("efi_same_test", log_dir=tmp_path)
        handlers = list(first.handlers)
        second = EFILogger.get_logger("efi_same_test", log_dir=tmp_path)
        assert second is first
        assert second.handlers == handlers

    def test_new_log_dir_reconfigures(self, tmp_path):
        EFILogger.get_logger("efi_move_test", log_dir=tmp_path / "a", console_output=False).info("first")
        logger = EFILogger.get_logger("efi_move_test", log_dir=tmp_path / "b", console_output=False)
        logger.info("second")

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert "first" in (tmp_path / "a" / "efi_move_test.log").read_text(encoding="utf-8")
        second_log = (tmp_path / "b" / "efi_move_test.log").read_text(encoding="utf-8")
        assert "second" in second_log
        assert "first" not in second_log

    def test_new_level_reconfigures(self):
        EFILogger.get_logger("efi_relevel_test", level=logging.WARNING)
        logger = EFILogger.get_logger("efi_relevel_test", level=logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG


class TestConfig:
    def test_constants(self):
        assert EFI_CONSTANTS.SIGNATURE_LIST_HEADER_SIZE == 28
        assert EFI_CONSTANTS.GUID_SIZE == 16
        assert Guid.parse(EFI_CONSTANTS.DEFAULT_OWNER_GUID) == Guid.nil()
        assert EFI_CONSTANTS.SIG_LIST_SUFFIX == ".esl"
        assert EFI_PATHS.LOGS.name == "logs"

    def test_log_level_default(self, monkeypatch):
        monkeypatch.delenv("EFI_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("EFI_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_log_level_invalid(self, monkeypatch):
        monkeypatch.setenv("EFI_LOG_LEVEL", "chatty")
        assert get_log_level() == logging.INFO
