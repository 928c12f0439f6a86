"""patient dispatch service: admission, priority-ordered treatment, lookup and status"""
import logging
import threading
from typing import Dict, List, Optional, Union
from config import QueueConfig
from ids import IdGenerator
from models import CaseType, PatientRecord, PatientStatus
from registry import PatientIndex, TreatmentLedger, WaitingRegistry
logger = logging.getLogger(__name__)
class PatientDispatcher:
    """manages admissions, the waiting queue and the treatment history"""
    def __init__(self, id_generator: Optional[IdGenerator] = None, config: Optional[QueueConfig] = None):
        self.config = config or QueueConfig()
        self.id_generator = id_generator or IdGenerator(start=self.config.id_start)
        self.waiting = WaitingRegistry()
        self.index = PatientIndex()
        self.ledger = TreatmentLedger()
        # registry, index and ledger are not safe to mutate from several threads on their own
        self.lock = threading.Lock()
    def admit(self, name: str, age: int, severity: int, case_type: Union[CaseType, str]) -> PatientRecord:
        """
        admit a new patient and put them in the waiting queue

        Args:
            name: patient name
            age: age in years (scored as given)
            severity: clinical severity, nominally 1-10 (scored as given)
            case_type: CaseType or "normal"/"emergency"
        returns: the new record, with id and priority filled in
        raises: ValueError for an unknown case type, or bad input when strict_admission is on
        """
        case_type = CaseType.parse(case_type)
        if self.config.strict_admission:
            self._validate_admission(name, age, severity)
        with self.lock:
            record = PatientRecord.create(self.id_generator.next_id(), name, age, severity, case_type)
            self.waiting.insert(record)
            self.index.put(record)
        logger.info("ID: %d | Calculated Priority: %d (%s logic used)",
                    record.id, record.priority, case_type.display_name)
        return record
    def _validate_admission(self, name: str, age: int, severity: int):
        """stricter checks applied only when strict_admission is enabled"""
        if not name or not name.strip():
            raise ValueError("Patient name must not be empty")
        if age < 0:
            raise ValueError(f"Age must be non-negative, got {age}")
        if not 1 <= severity <= 10:
            raise ValueError(f"Severity must be between 1 and 10, got {severity}")
    def treat_next(self) -> Optional[PatientRecord]:
        """treat the highest-priority waiting patient; None if the queue is empty"""
        with self.lock:
            record = self.waiting.extract_max()
            if record is None:
                logger.info("The waiting queue is currently empty.")
                return None
            self.ledger.append(record)
        logger.info("Treated ID: %d | Priority: %d | Case: %s",
                    record.id, record.priority, record.case_type.display_name)
        return record
    def find_by_id(self, patient_id: int) -> Optional[PatientRecord]:
        """look up any admitted patient, waiting or discharged"""
        with self.lock:
            record = self.index.get(patient_id)
        if record is None:
            logger.debug("Patient with ID %s not found", patient_id)
        return record
    def status_of(self, record: PatientRecord) -> PatientStatus:
        """DISCHARGED once the patient is in the treatment history, WAITING otherwise"""
        with self.lock:
            if self.ledger.contains(record):
                return PatientStatus.DISCHARGED
            return PatientStatus.WAITING
    def waiting_snapshot(self) -> List[PatientRecord]:
        """waiting patients, highest priority first (queue is not modified)"""
        with self.lock:
            return self.waiting.peek_all()
    def history(self) -> List[PatientRecord]:
        """treated patients, oldest first"""
        with self.lock:
            return self.ledger.all()
    def waiting_count(self) -> int:
        with self.lock:
            return len(self.waiting)
    def get_statistics(self) -> Dict:
        """queue statistics for monitoring"""
        with self.lock:
            admitted = self.index.values()
            next_up = self.waiting.peek_max()
            return {
                "total_admitted": len(admitted),
                "waiting_patients": len(self.waiting),
                "discharged_patients": len(self.ledger),
                "emergency_admissions": sum(1 for r in admitted if r.case_type == CaseType.EMERGENCY),
                "normal_admissions": sum(1 for r in admitted if r.case_type == CaseType.NORMAL),
                "highest_waiting_priority": next_up.priority if next_up else None,
                "next_to_treat_id": next_up.id if next_up else None,
                "last_issued_id": self.id_generator.peek()
            }
