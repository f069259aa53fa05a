"""Total bidirectional enumeration translators.

Every translator is built from a single ordered list of
``(persistence, display)`` pairs. The forward map is the pair list as-is;
the reverse map keeps the first persistence value listed for each display
value, so the order of the pairs decides which persistence state a lossy
display label writes back as. The reverse default is the canonical
persistence value of the forward default.
"""
from typing import Any


class Translator:
    """A total persistence <-> display mapping for one enumeration."""

    def __init__(self, name: str, pairs: list[tuple[Any, Any]], default: Any) -> None:
        self.name = name
        self.pairs = tuple(pairs)
        self.default = default

        self._forward: dict = {}
        self._reverse: dict = {}
        for persistence, display in self.pairs:
            self._forward.setdefault(persistence, display)
            self._reverse.setdefault(display, persistence)

        if default not in self._reverse:
            raise ValueError(f"{name}: default {default!r} is not a display value")
        self.reverse_default = self._reverse[default]

    @property
    def persistence_values(self) -> tuple:
        return tuple(self._forward)

    @property
    def display_values(self) -> tuple:
        return tuple(self._reverse)

    def to_display(self, value: Any) -> Any:
        try:
            return self._forward.get(value, self.default)
        except TypeError:  # unhashable input
            return self.default

    def to_persistence(self, value: Any) -> Any:
        try:
            return self._reverse.get(value, self.reverse_default)
        except TypeError:
            return self.reverse_default

    def __repr__(self) -> str:
        return f"Translator({self.name!r}, default={self.default!r})"


ROLE = Translator(
    "role",
    [
        ("super_admin", "Admin"),
        ("risk_manager", "Data Entry"),
        ("risk_owner", "Data Entry"),
        ("viewer", "Viewer"),
    ],
    default="Viewer",
)

# "monitoring" is listed ahead of "treated" so Monitoring writes back as monitoring
RISK_STATUS = Translator(
    "risk_status",
    [
        ("identified", "Open"),
        ("analyzing", "Open"),
        ("analyzed", "Open"),
        ("treating", "Open"),
        ("monitoring", "Monitoring"),
        ("treated", "Monitoring"),
        ("accepted", "Monitoring"),
        ("closed", "Closed"),
    ],
    default="Open",
)

RISK_LEVEL = Translator(
    "risk_level",
    [
        ("low", "Low"),
        ("medium", "Medium"),
        ("high", "High"),
        ("critical", "Critical"),
    ],
    default="Low",
)

TREATMENT_STRATEGY = Translator(
    "treatment_strategy",
    [
        ("avoid", "Avoid"),
        ("mitigate", "Mitigate"),
        ("transfer", "Transfer"),
        ("accept", "Accept"),
    ],
    default="Mitigate",
)

# There is no persisted "Not Started" state; it writes back as not completed.
ACTION_COMPLETION = Translator(
    "action_completion",
    [
        (True, "Done"),
        (False, "In Progress"),
    ],
    default="In Progress",
)

SERVICE_CRITICALITY = Translator(
    "service_criticality",
    [
        ("critical", "Critical"),
        ("high", "High"),
        ("medium", "Medium"),
        ("low", "Low"),
    ],
    default="Medium",
)

BCP_TEST_STATUS = Translator(
    "bcp_test_status",
    [
        ("planned", "Planned"),
        ("in_progress", "Planned"),
        ("passed", "Passed"),
        ("partial", "Passed"),
        ("failed", "Failed"),
        ("cancelled", "Failed"),
    ],
    default="Planned",
)

KRI_STATUS = Translator(
    "kri_status",
    [
        ("green", "green"),
        ("yellow", "yellow"),
        ("red", "red"),
    ],
    default="green",
)

INCIDENT_SEVERITY = Translator(
    "incident_severity",
    [
        ("low", "Low"),
        ("medium", "Medium"),
        ("high", "High"),
        ("critical", "Critical"),
    ],
    default="Medium",
)

INCIDENT_STATUS = Translator(
    "incident_status",
    [
        ("open", "Open"),
        ("investigating", "Investigating"),
        ("contained", "Investigating"),
        ("resolved", "Resolved"),
        ("closed", "Resolved"),
    ],
    default="Open",
)

ALL_TRANSLATORS: tuple[Translator, ...] = (
    ROLE,
    RISK_STATUS,
    RISK_LEVEL,
    TREATMENT_STRATEGY,
    ACTION_COMPLETION,
    SERVICE_CRITICALITY,
    BCP_TEST_STATUS,
    KRI_STATUS,
    INCIDENT_SEVERITY,
    INCIDENT_STATUS,
)
