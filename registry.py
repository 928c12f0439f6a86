"""waiting queue, id index and treatment history for admitted patients"""
import heapq
import itertools
from typing import Dict, List, Optional, Set, Tuple
from models import PatientRecord
def _sort_key(record: PatientRecord) -> Tuple[int, int]:
    """
    queue ordering: higher priority first, then lower id (admitted earlier)
    kept here rather than on PatientRecord so ordering can change without touching record equality
    """
    return (-record.priority, record.id)
class WaitingRegistry:
    """min-heap over _sort_key, so the top of the heap is the patient to treat next"""
    def __init__(self):
        self._heap: List[Tuple[Tuple[int, int], int, PatientRecord]] = []
        self._counter = itertools.count()  # insertion order, keeps records out of tuple comparison
    def insert(self, record: PatientRecord):
        """O(log n); id uniqueness is the id generator's job"""
        heapq.heappush(self._heap, (_sort_key(record), next(self._counter), record))
    def extract_max(self) -> Optional[PatientRecord]:
        """remove and return the highest-priority patient, None if nobody is waiting"""
        if not self._heap:
            return None
        _, _, record = heapq.heappop(self._heap)
        return record
    def peek_max(self) -> Optional[PatientRecord]:
        if not self._heap:
            return None
        return self._heap[0][2]
    def peek_all(self) -> List[PatientRecord]:
        """sorted copy, highest priority first; the heap itself is untouched"""
        return [record for _, _, record in sorted(self._heap)]
    def is_empty(self) -> bool:
        return len(self._heap) == 0
    def __len__(self):
        return len(self._heap)
class PatientIndex:
    """id -> record lookup for every admitted patient, waiting or discharged"""
    def __init__(self):
        self._table: Dict[int, PatientRecord] = {}
    def put(self, record: PatientRecord):
        self._table[record.id] = record
    def get(self, patient_id: int) -> Optional[PatientRecord]:
        return self._table.get(patient_id)
    def values(self) -> List[PatientRecord]:
        return list(self._table.values())
    def __contains__(self, patient_id) -> bool:
        return patient_id in self._table
    def __len__(self):
        return len(self._table)
class TreatmentLedger:
    """append-only treatment history in the order patients were treated"""
    def __init__(self):
        self._entries: List[PatientRecord] = []
        self._discharged_ids: Set[int] = set()
    def append(self, record: PatientRecord):
        self._entries.append(record)
        self._discharged_ids.add(record.id)
    def all(self) -> List[PatientRecord]:
        """oldest first"""
        return list(self._entries)
    def contains(self, record: PatientRecord) -> bool:
        # set lookup instead of scanning the history
        return record.id in self._discharged_ids
    def is_empty(self) -> bool:
        return len(self._entries) == 0
    def __len__(self):
        return len(self._entries)
