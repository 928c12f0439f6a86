"""runtime configuration for the patient queue service and API"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
TRUE_VALUES = ("true", "1", "yes")
@dataclass
class QueueConfig:
    """settings read from PATIENT_QUEUE_* environment variables"""
    # server settings
    host: str = "0.0.0.0"
    port: int = 5001
    debug: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    # queue settings
    id_start: int = 1000  # first admitted patient gets id_start + 1
    strict_admission: bool = False  # reject empty names, negative ages, severity outside 1-10
    log_level: str = "INFO"
    @classmethod
    def from_env(cls) -> "QueueConfig":
        """load configuration from environment variables"""
        return cls(
            host=os.getenv("PATIENT_QUEUE_HOST", "0.0.0.0"),
            port=int(os.getenv("PATIENT_QUEUE_PORT", "5001")),
            debug=os.getenv("PATIENT_QUEUE_DEBUG", "").lower() in TRUE_VALUES,
            cors_origins=os.getenv("PATIENT_QUEUE_CORS_ORIGINS", "*").split(","),
            id_start=int(os.getenv("PATIENT_QUEUE_ID_START", "1000")),
            strict_admission=os.getenv("PATIENT_QUEUE_STRICT", "").lower() in TRUE_VALUES,
            log_level=os.getenv("PATIENT_QUEUE_LOG_LEVEL", "INFO").upper(),
        )
_config: Optional[QueueConfig] = None
def get_config() -> QueueConfig:
    """global configuration instance, loaded from the environment on first use"""
    global _config
    if _config is None:
        _config = QueueConfig.from_env()
    return _config
