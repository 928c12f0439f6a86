"""REST API for the patient priority queue"""
import logging
from flask import Flask, request, jsonify
from flask_cors import CORS
from typing import Optional
from config import get_config
from logging_utils import configure_logging
from models import CaseType, PatientRecord
from main import initialize_hospital_system
from service import PatientDispatcher
logger = logging.getLogger(__name__)
app = Flask(__name__)
CORS(app, origins=get_config().cors_origins)
service: Optional[PatientDispatcher] = None
def serialize_patient(record: PatientRecord, include_status: bool = True) -> dict:
    """Convert PatientRecord to dict for API response"""
    data = {
        "id": record.id, "name": record.name, "age": record.age, "severity": record.severity,
        "case_type": record.case_type.value, "case_display": record.case_type.display_name,
        "priority": record.priority, "admitted_at": record.admitted_at.isoformat()
    }
    if include_status and service is not None:
        data["status"] = service.status_of(record).value
    return data
def _parse_int_field(data: dict, field: str) -> int:
    """required integer field; bools and floats with a fraction are rejected"""
    value = data[field]
    if isinstance(value, bool):
        raise ValueError(f"Field {field} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Field {field} must be an integer")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Field {field} must be an integer")
def _parse_emergency_flag(value) -> bool:
    """JSON bool, or "yes"/"true" like the admission desk prompt; any other string is normal"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("yes", "true")
    raise ValueError("Field emergency must be a boolean or yes/no")
@app.route('/')
def index():
    """List available endpoints"""
    return jsonify({
        "service": "patient-priority-queue",
        "endpoints": [
            "GET  /api/health",
            "POST /api/initialize",
            "POST /api/patient/admit",
            "POST /api/patient/treat-next",
            "GET  /api/patient/<id>",
            "GET  /api/patients/waiting",
            "GET  /api/patients/history",
            "GET  /api/statistics"
        ]
    })
@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({"status": "healthy", "service_initialized": service is not None})
@app.route('/api/initialize', methods=['POST'])
def initialize():
    """Initialize (or reset) the patient queue"""
    global service
    service = initialize_hospital_system()
    logger.info("Patient queue initialized")
    return jsonify({
        "status": "initialized",
        "statistics": service.get_statistics()
    })
@app.route('/api/patient/admit', methods=['POST'])
def admit_patient():
    """Admit a new patient"""
    if service is None:
        return jsonify({"error": "Service not initialized"}), 400
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON data or Content-Type not application/json"}), 400
    required_fields = ['name', 'age', 'severity']
    for field in required_fields:
        if field not in data:
            return jsonify({"error": f"Missing required field: {field}"}), 400
    if not isinstance(data['name'], str):
        return jsonify({"error": "Field name must be a string"}), 400
    try:
        # case_type wins over the yes/no style emergency flag
        if 'case_type' in data:
            case_type = data['case_type']
        else:
            case_type = CaseType.EMERGENCY if _parse_emergency_flag(data.get('emergency', False)) else CaseType.NORMAL
        age = _parse_int_field(data, 'age')
        severity = _parse_int_field(data, 'severity')
        record = service.admit(data['name'], age, severity, case_type)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"status": "admitted", "patient": serialize_patient(record)}), 201
@app.route('/api/patient/treat-next', methods=['POST'])
def treat_next_patient():
    """Treat the highest-priority waiting patient"""
    if service is None:
        return jsonify({"error": "Service not initialized"}), 400
    record = service.treat_next()
    if record is None:
        return jsonify({"status": "empty", "message": "The waiting queue is currently empty.", "patient": None})
    return jsonify({"status": "treated", "patient": serialize_patient(record)})
@app.route('/api/patient/<int(signed=True):patient_id>', methods=['GET'])
def get_patient(patient_id):
    """Get patient details and waiting/discharged status"""
    if service is None:
        return jsonify({"error": "Service not initialized"}), 400
    record = service.find_by_id(patient_id)
    if record is None:
        return jsonify({"error": f"Patient with ID {patient_id} not found"}), 404
    return jsonify(serialize_patient(record))
@app.route('/api/patients/waiting', methods=['GET'])
def get_waiting_patients():
    """Get waiting patients, highest priority first"""
    if service is None:
        return jsonify({"error": "Service not initialized"}), 400
    waiting = service.waiting_snapshot()
    return jsonify({
        "count": len(waiting),
        "patients": [serialize_patient(record) for record in waiting]
    })
@app.route('/api/patients/history', methods=['GET'])
def get_treatment_history():
    """Get treated patients in treatment order"""
    if service is None:
        return jsonify({"error": "Service not initialized"}), 400
    treated = service.history()
    return jsonify({
        "count": len(treated),
        "patients": [serialize_patient(record) for record in treated]
    })
@app.route('/api/statistics', methods=['GET'])
def get_statistics():
    """Get queue statistics"""
    if service is None:
        return jsonify({"error": "Service not initialized"}), 400
    return jsonify(service.get_statistics())

if __name__ == '__main__':
    config = get_config()
    configure_logging(config.log_level)
    print("Starting Patient Priority Queue API Server...")
    print("=" * 60)
    print(f"API: http://localhost:{config.port}/")
    print("  POST /api/initialize          - Initialize the queue")
    print("  POST /api/patient/admit       - Admit a patient")
    print("  POST /api/patient/treat-next  - Treat the next patient")
    print("  GET  /api/patient/<id>        - Patient details and status")
    print("  GET  /api/patients/waiting    - Waiting queue")
    print("  GET  /api/patients/history    - Treatment history")
    print("  GET  /api/statistics          - Queue statistics")
    print("=" * 60)
    print("\nMake sure to initialize the service first with POST /api/initialize")
    app.run(debug=config.debug, port=config.port, host=config.host)
