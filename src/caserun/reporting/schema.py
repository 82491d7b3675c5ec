"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "caserun report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "errors", "success_rate", "duration_s"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
                "errors": {"type": "integer", "minimum": 0},
                "success_rate": {"type": "number", "minimum": 0, "maximum": 100},
                "duration_s": {"type": "number"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "name", "status", "duration_ms", "expected"],
                "properties": {
                    "index": {"type": "integer", "minimum": 1},
                    "name": {"type": "string", "minLength": 1},
                    "status": {"type": "string", "enum": ["passed", "failed", "error"]},
                    "duration_ms": {"type": "number"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "expected": {},
                    "actual": {},
                    "error": {"type": "string"},
                    "detail": {"type": "string"},
                },
            },
        },
    },
}
