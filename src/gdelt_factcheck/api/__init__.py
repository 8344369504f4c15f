from gdelt_factcheck.api.app import create_app
from gdelt_factcheck.api.schemas import ENGINE, FactCheckResponse, ReliabilityOut

__all__ = ["ENGINE", "FactCheckResponse", "ReliabilityOut", "create_app"]
