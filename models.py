"""models for the patient priority queue"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Union
class CaseType(Enum):
    """
    patient category picked at admission
    emergency cases weigh severity twice as much as normal cases, so with equal
    severity and age an emergency patient always outranks a normal one
    """
    NORMAL = "normal"
    EMERGENCY = "emergency"
    @property
    def severity_weight(self) -> int:
        """multiplier applied to severity by the priority policy"""
        return {
            CaseType.NORMAL: 10,
            CaseType.EMERGENCY: 20
        }[self]
    @property
    def display_name(self) -> str:
        """label shown to staff"""
        return {
            CaseType.NORMAL: "Normal",
            CaseType.EMERGENCY: "EMERGENCY"
        }[self]
    @classmethod
    def parse(cls, value: Union["CaseType", str]) -> "CaseType":
        """accept an enum member or its name/value string (case-insensitive)"""
        if isinstance(value, CaseType):
            return value
        key = str(value).strip().lower()
        for case_type in cls:
            if key == case_type.value:
                return case_type
        raise ValueError(f"Invalid case type: {value}")
class PatientStatus(Enum):
    """where an admitted patient currently is"""
    WAITING = "waiting"
    DISCHARGED = "discharged"
def calculate_priority(case_type: CaseType, severity: int, age: int) -> int:
    """
    priority score for a new admission (higher = treated sooner)
    normal:    severity * 10 + age
    emergency: severity * 20 + age
    no range checks, out-of-range severity/age are scored as given
    """
    return severity * case_type.severity_weight + age
@dataclass(frozen=True)
class PatientRecord:
    """admitted patient; priority is fixed at admission and never recomputed"""
    id: int
    name: str
    age: int
    severity: int
    case_type: CaseType
    priority: int
    admitted_at: datetime = field(default_factory=datetime.now, compare=False)
    @classmethod
    def create(cls, patient_id: int, name: str, age: int, severity: int, case_type: CaseType) -> "PatientRecord":
        """build a record, deriving the priority from the policy"""
        return cls(
            id=patient_id,
            name=name,
            age=age,
            severity=severity,
            case_type=case_type,
            priority=calculate_priority(case_type, severity, age)
        )
    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id}, Priority: {self.priority}, Case: {self.case_type.display_name})"
