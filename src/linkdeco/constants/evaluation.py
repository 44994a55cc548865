"""Builtins exposed to user-authored rule expressions."""

from __future__ import annotations

import math
from typing import Any

SAFE_BUILTINS: dict[str, Any] = {
    "abs": abs,
    "all": all,
    "any": any,
    "bool": bool,
    "ceil": math.ceil,
    "dict": dict,
    "enumerate": enumerate,
    "filter": filter,
    "float": float,
    "floor": math.floor,
    "int": int,
    "isinstance": isinstance,
    "len": len,
    "list": list,
    "map": map,
    "max": max,
    "min": min,
    "range": range,
    "reversed": reversed,
    "round": round,
    "set": set,
    "sorted": sorted,
    "str": str,
    "sum": sum,
    "tuple": tuple,
    "zip": zip,
    "True": True,
    "False": False,
    "None": None,
}

EXPRESSION_FILENAME: str = "<rule-expression>"
SCRIPT_FILENAME: str = "<metadata-script>"
