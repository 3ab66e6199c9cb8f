"""
Centralized logger for the EFI tools.

Loggers are configured from config.efi_config: the level defaults to
EFI_LOG_LEVEL and file output goes to EFI_PATHS.LOGS unless another
directory is given. Asking again for a cached logger with a different
level or directory reconfigures it in place.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from config import EFI_PATHS, get_log_level

# Formato del log: [2026-10-09 14:30:45] [cert_to_efi_sig_list] [INFO] Messaggio
LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class EFILogger:
    """
    Centralized logger factory with console and file output.

    The cache maps a logger name to the (level, log file, console) triple it
    was built with.
    """

    _loggers: Dict[str, Tuple[int, Optional[Path], bool]] = {}

    @staticmethod
    def resolve_log_file(name: str, log_dir: Optional[Union[str, Path]], log_to_file: bool) -> Optional[Path]:
        """
        Path del file di log, None se il logging su file non è richiesto.

        Un log_dir esplicito ha la precedenza; con log_to_file=True e nessun
        log_dir si usa EFI_PATHS.LOGS.
        """
        if log_dir is None and not log_to_file:
            return None
        directory = Path(log_dir) if log_dir is not None else EFI_PATHS.LOGS
        return directory / f"{name}.log"

    @staticmethod
    def get_logger(
        name: str,
        log_dir: Optional[Union[str, Path]] = None,
        level: Optional[int] = None,
        console_output: bool = True,
        log_to_file: bool = False,
    ) -> logging.Logger:
        """
        Ottiene o crea un logger configurato.

        Args:
            name: Nome del logger (es. "cert_to_efi_sig_list", "EFIFileHandler")
            log_dir: Directory per il file di log (opzionale)
            level: Livello minimo di log (default: get_log_level(), cioè EFI_LOG_LEVEL)
            console_output: Se True, stampa anche su stdout
            log_to_file: Se True e log_dir manca, scrive in EFI_PATHS.LOGS

        Returns:
            Logger configurato pronto all'uso
        """
        if level is None:
            level = get_log_level()
        log_file = EFILogger.resolve_log_file(name, log_dir, log_to_file)
        settings = (level, log_file, console_output)

        logger = logging.getLogger(name)
        if EFILogger._loggers.get(name) == settings:
            return logger

        EFILogger._close_handlers(logger)
        logger.setLevel(level)
        logger.propagate = False

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        EFILogger._loggers[name] = settings
        return logger

    @staticmethod
    def set_level(name: str, level: int):
        """Changes log level for an existing logger."""
        if name in EFILogger._loggers:
            _, log_file, console_output = EFILogger._loggers[name]
            logger = logging.getLogger(name)
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
            EFILogger._loggers[name] = (level, log_file, console_output)

    @staticmethod
    def clear_cache():
        """Closes handlers and clears logger cache."""
        for name in EFILogger._loggers:
            EFILogger._close_handlers(logging.getLogger(name))
        EFILogger._loggers.clear()

    @staticmethod
    def _close_handlers(logger: logging.Logger):
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
