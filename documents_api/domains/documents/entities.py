import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_document_id(raw: str) -> Optional[int]:
    """Разбор id из пути: берется ведущее целое, "12abc" -> 12, "abc" -> None"""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


@dataclass
class Success:
    rows: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def first(self) -> Dict[str, Any]:
        return self.rows[0]


@dataclass
class NotFound:
    message: str = "Document not found"


@dataclass
class InfrastructureFailure:
    cause: BaseException


Outcome = Union[Success, NotFound, InfrastructureFailure]
