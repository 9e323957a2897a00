from typing import Any, Dict


class ErrorCodes:
    """Numeric codes attached to every AbiExportError"""
    CONFIG_FILE_NOT_FOUND = 1001
    CONFIG_VALIDATION_FAILED = 1002

    ARTIFACT_NOT_FOUND = 2001
    ARTIFACT_PARSE_FAILED = 2002
    ABI_FIELD_MISSING = 2003
    ABI_WRITE_FAILED = 2004


class AbiExportError(Exception):
    """Base exception class for ABI export"""

    default_code = 0

    def __init__(self, message: str, code: int = None, **details: Any):
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details: Dict[str, Any] = {k: v for k, v in details.items() if v is not None}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


class ExtractionError(AbiExportError):
    """Failure while extracting the ABI of a single contract"""

    kind = "ExtractionError"

    def __init__(self, message: str, contract: str = None, path: str = None, code: int = None):
        super().__init__(message, code=code, contract=contract, path=path)
        self.contract = contract
        self.path = path


class ArtifactNotFoundError(ExtractionError):
    """Build artifact is missing or unreadable"""
    kind = "NotFound"
    default_code = ErrorCodes.ARTIFACT_NOT_FOUND


class ArtifactParseError(ExtractionError):
    """Build artifact is not valid JSON"""
    kind = "ParseError"
    default_code = ErrorCodes.ARTIFACT_PARSE_FAILED


class MissingAbiError(ExtractionError):
    """Build artifact has no top-level abi field"""
    kind = "MissingField"
    default_code = ErrorCodes.ABI_FIELD_MISSING


class AbiWriteError(ExtractionError):
    """Output file could not be written"""
    kind = "WriteError"
    default_code = ErrorCodes.ABI_WRITE_FAILED


class ConfigurationError(AbiExportError):
    """Invalid or missing configuration file"""

    default_code = ErrorCodes.CONFIG_VALIDATION_FAILED

    def __init__(self, message: str, config_file: str = None, field: str = None, code: int = None):
        super().__init__(message, code=code, config_file=config_file, field=field)
