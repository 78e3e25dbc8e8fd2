from typing import Optional
from pydantic import BaseModel
from enum import Enum

class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"

class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str
    suggestion: Optional[str] = None
    auto_fixable: bool = False
