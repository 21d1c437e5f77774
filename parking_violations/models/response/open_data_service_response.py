from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class OpenDataServiceResponse:
    """ Represents a response from the NYC open data portal """
    success: bool

    data: Optional[List[Dict[str, Any]]] = None
    message: Optional[str] = None
