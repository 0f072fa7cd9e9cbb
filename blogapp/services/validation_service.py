from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    failures: list[tuple[str, str]] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)

    def fails(self) -> bool:
        return bool(self.failures)


def _message_for(schema, field_name: str, rule: str) -> str:
    key = f"{field_name}.{rule}"
    return schema.messages.get(key, f"{rule} validation failed on {field_name}")


def validate_all(schema, data) -> ValidationResult:
    """Run every rule of ``schema`` against ``data`` and collect all failures."""
    errors = schema.validate(dict(data))

    failures = []
    for field_name, rules in errors.items():
        if isinstance(rules, str):
            rules = [rules]
        for rule in rules:
            failures.append((field_name, rule))

    return ValidationResult(
        failures=failures,
        messages=[_message_for(schema, f, r) for f, r in failures],
    )
