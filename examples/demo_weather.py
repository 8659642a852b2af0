#!/usr/bin/env python3
"""
Demo: Validating a weather tool's responses.

This demonstrates:
- All six rule kinds against one recorded response
- A custom rule backed by a registered predicate
- An expected-error test case checked against the raw error response
"""

import json

from toolprobe import register_predicate, validate_response
from toolprobe.validation import format_validation_errors


@register_predicate("highs_above_lows")
def highs_above_lows(data):
    return all(day["high"] >= day["low"] for day in data["days"])


def envelope(payload):
    return {"content": [{"type": "text", "text": json.dumps(payload)}]}


def main():
    print("=" * 60)
    print("toolprobe Demo: Weather Tool")
    print("=" * 60)

    forecast = {
        "location": {"city": "Oslo", "country": "NO"},
        "conditions": ["cloudy", "snow"],
        "days": [
            {"date": "2026-10-20", "high": 4, "low": -1},
            {"date": "2026-10-21", "high": 2, "low": -3},
        ],
    }

    test_case = {
        "id": "forecast-oslo",
        "toolName": "get_forecast",
        "expectedOutcome": {
            "status": "success",
            "validationRules": [
                {"type": "equals", "target": "location", "value": {"country": "NO", "city": "Oslo"},
                 "message": "Wrong location"},
                {"type": "arrayLength", "target": "days", "value": 3, "message": "Expected 3 forecast days"},
                {"type": "hasProperty", "target": "days[0].high", "message": "No high temperature"},
                {"type": "matches", "target": "days[0].date", "value": "/^\\d{4}-\\d{2}-\\d{2}$/",
                 "message": "Date is not ISO formatted"},
                {"type": "contains", "target": "conditions", "value": "snow", "message": "Snow not reported"},
                {"type": "custom", "predicate": "highs_above_lows", "message": "High below low"},
            ],
        },
    }

    print("\nExpected success, recorded forecast:")
    result = validate_response({"status": "success", "data": envelope(forecast)}, test_case)
    print(format_validation_errors(result.errors))

    error_case = {
        "id": "forecast-atlantis",
        "toolName": "get_forecast",
        "expectedOutcome": {
            "status": "error",
            "validationRules": [
                {"type": "contains", "target": "error.message", "value": "Unknown city",
                 "message": "Error does not name the problem"},
            ],
        },
    }

    print("\nExpected error, recorded error:")
    result = validate_response({"status": "error", "error": {"message": "Unknown city: Atlantis"}}, error_case)
    print("✓ Passed" if result.valid else format_validation_errors(result.errors))


if __name__ == "__main__":
    main()
