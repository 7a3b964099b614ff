from dataclasses import dataclass, field

PLURALIZATION_KEYS = frozenset(["zero", "one", "two", "few", "many", "other"])


@dataclass(frozen=True)
class Scalar:
    text: str


@dataclass
class Mapping:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def has_pluralization_key(self) -> bool:
        return not PLURALIZATION_KEYS.isdisjoint(self.entries)

    def sorted_keys(self) -> list[str]:
        return sorted(self.entries)

    def get(self, key: str) -> "Value | None":
        return self.entries.get(key)


Value = Scalar | Mapping


@dataclass(frozen=True)
class FileReport:
    filename: str
    violations: dict[str, tuple[str, ...]]

    @property
    def has_errors(self) -> bool:
        return any(self.violations.values())
