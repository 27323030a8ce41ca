"""
Logger utility for Terminal Notes
Provides centralized logging functionality
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


def log_directory() -> Path:
    """Log files go under logs/ in the working directory, beside the data files"""
    return Path.cwd() / "logs"


class Logger:
    """Centralized logging utility"""
    
    _instance: Optional['Logger'] = None
    _initialized: bool = False
    
    def __new__(cls) -> 'Logger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __init__(self):
        if not self._initialized:
            self.setup_logging()
            Logger._initialized = True
    
    def setup_logging(self) -> None:
        """Setup logging configuration"""
        log_dir = log_directory()
        handlers = [logging.StreamHandler(sys.stdout)]
        try:
            log_dir.mkdir(exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir / f"terminal_notes_{timestamp}.log"
            handlers.insert(0, logging.FileHandler(log_file, encoding='utf-8'))
        except OSError:
            # Read-only working directory; stdout only
            pass
        
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers
        )
        
        self.logger = logging.getLogger('TerminalNotes')
    
    def info(self, message: str) -> None:
        """Log info message"""
        self.logger.info(message)
    
    def warning(self, message: str) -> None:
        """Log warning message"""
        self.logger.warning(message)
    
    def error(self, message: str) -> None:
        """Log error message"""
        self.logger.error(message)
    
    def debug(self, message: str) -> None:
        """Log debug message"""
        self.logger.debug(message)
