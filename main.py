"""
Main entry point and initialization for the patient priority queue
"""
from typing import Optional
from config import QueueConfig, get_config
from ids import IdGenerator
from logging_utils import configure_logging
from models import CaseType
from service import PatientDispatcher
def initialize_hospital_system(config: Optional[QueueConfig] = None) -> PatientDispatcher:
    """
    build a dispatcher with its own id sequence
    each call starts from an empty queue and a fresh counter
    """
    config = config or get_config()
    return PatientDispatcher(id_generator=IdGenerator(start=config.id_start), config=config)

def example_usage():
    """ex usage of the system"""
    config = get_config()
    configure_logging(config.log_level)
    service = initialize_hospital_system(config)
    print("Hospital patient priority queue\n")
    # ex 1: emergency outranks normal with the same severity
    print("Example 1: emergency vs normal")
    normal = service.admit("Alice", 30, 5, CaseType.NORMAL)
    emergency = service.admit("Bob", 20, 5, CaseType.EMERGENCY)
    print(f"  admitted: {normal}")
    print(f"  admitted: {emergency}")
    treated = service.treat_next()
    print(f"  treated first: {treated}")
    print()
    # ex 2: equal priority, earlier admission goes first
    print("Example 2: equal priority")
    first = service.admit("Carol", 10, 3, CaseType.NORMAL)
    second = service.admit("Dave", 30, 1, CaseType.NORMAL)
    print(f"  {first.name}: {first.priority}, {second.name}: {second.priority}")
    print("  waiting queue (highest priority first):")
    for i, record in enumerate(service.waiting_snapshot(), start=1):
        print(f"    {i}. {record}")
    print()
    # ex 3: lookup and status
    print("Example 3: search by id")
    for patient_id in (normal.id, emergency.id, -1):
        record = service.find_by_id(patient_id)
        if record is None:
            print(f"  Patient with ID {patient_id} not found.")
        else:
            print(f"  {record.name} | Status: {service.status_of(record).name}")
    print()
    # drain the queue
    print("Example 4: treat everyone")
    while True:
        record = service.treat_next()
        if record is None:
            print("  The waiting queue is currently empty.")
            break
        print(f"  Treated: {record.name} | Priority: {record.priority} | Case: {record.case_type.display_name}")
    print()
    print("Treatment history (chronological)")
    for i, record in enumerate(service.history(), start=1):
        print(f"  {i}. {record}")
    print()
    print("System statistics")
    for key, value in service.get_statistics().items():
        print(f"  {key}: {value}")
if __name__ == "__main__":
    example_usage()
