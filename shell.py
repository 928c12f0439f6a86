"""interactive text menu for front-desk staff"""
import sys
from typing import Callable, Optional, TextIO
from models import CaseType, PatientStatus
from service import PatientDispatcher
MENU = """
--- Menu ---
1. Add New Patient (Admission)
2. Treat Next Patient (Dequeue)
3. View Current Waiting Queue
4. Search Patient by ID
5. View Treatment History
6. Exit"""
EXIT_CHOICE = 6
class QueueShell:
    """
    menu loop over a PatientDispatcher
    input_func/output are swappable so the loop can be driven from tests
    end of input (EOFError) is treated like choosing Exit
    """
    def __init__(self, service: PatientDispatcher, input_func: Callable[[str], str] = input, output: Optional[TextIO] = None):
        self.service = service
        self.input_func = input_func
        self.output = output
    def _print(self, text: str = ""):
        print(text, file=self.output or sys.stdout)
    def start(self):
        self._print("\n==== Hospital Patient Management System ====")
        while True:
            self._print(MENU)
            try:
                raw = self.input_func("Enter choice: ").strip()
            except EOFError:
                self._print("Exiting System. Goodbye!")
                return
            try:
                choice = int(raw)
            except ValueError:
                self._print("Invalid input. Please enter a number.")
                continue
            if choice == EXIT_CHOICE:
                self._print("Exiting System. Goodbye!")
                return
            handler = {
                1: self.add_patient,
                2: self.treat_next_patient,
                3: self.view_waiting_queue,
                4: self.search_patient,
                5: self.view_history
            }.get(choice)
            if handler is None:
                self._print("Invalid choice. Please try again.")
                continue
            try:
                handler()
            except EOFError:
                self._print("Exiting System. Goodbye!")
                return
            except ValueError as e:
                # strict admission rejected the input
                self._print(f"Admission rejected: {e}")
    def _read_int(self, prompt: str) -> int:
        """keep asking until the answer parses as an integer"""
        raw = self.input_func(prompt)
        while True:
            try:
                return int(raw.strip())
            except ValueError:
                self._print("Invalid input. Please enter a number.")
                raw = self.input_func("Enter value: ")
    def add_patient(self):
        name = self.input_func("Enter Patient Name: ")
        age = self._read_int("Enter Age: ")
        severity = self._read_int("Enter Severity (1-10): ")
        answer = self.input_func("Is this an Emergency Case? (yes/no): ").strip().lower()
        case_type = CaseType.EMERGENCY if answer == "yes" else CaseType.NORMAL
        record = self.service.admit(name, age, severity, case_type)
        self._print(f"ID: {record.id} | Calculated Priority: {record.priority} ({case_type.display_name} logic used)")
    def treat_next_patient(self):
        self._print("Treating Patient...")
        record = self.service.treat_next()
        if record is None:
            self._print("The waiting queue is currently empty.")
            return
        self._print(f"Treated: {record.name} | Priority: {record.priority} | Case: {record.case_type.display_name}")
    def view_waiting_queue(self):
        self._print("--- Current Waiting Queue (Highest Priority First) ---")
        waiting = self.service.waiting_snapshot()
        if not waiting:
            self._print("Queue is empty.")
        for i, record in enumerate(waiting, start=1):
            self._print(f"{i}. {record}")
        self._print("-" * 53)
    def search_patient(self):
        patient_id = self._read_int("Enter Patient ID to search: ")
        record = self.service.find_by_id(patient_id)
        if record is None:
            self._print(f"Patient with ID {patient_id} not found.")
            return
        status = self.service.status_of(record)
        label = "DISCHARGED" if status == PatientStatus.DISCHARGED else "WAITING"
        self._print(f"Patient Found: {record.name} | Status: {label}")
    def view_history(self):
        self._print("--- Treatment History (Chronological) ---")
        treated = self.service.history()
        if not treated:
            self._print("No patients have been treated yet.")
        for i, record in enumerate(treated, start=1):
            self._print(f"{i}. {record}")
        self._print("-" * 41)
if __name__ == "__main__":
    from config import get_config
    from logging_utils import configure_logging
    from main import initialize_hospital_system
    configure_logging(get_config().log_level)
    QueueShell(initialize_hospital_system()).start()
