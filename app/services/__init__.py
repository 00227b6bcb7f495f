from app.services.openapi.endpoint_parser import extract_endpoint_details
from app.services.openapi.example_synthesizer import generate_mock_from_schema
from app.services.openapi.schema_normalizer import extract_schema_structure
from app.services.openapi.schema_resolver import resolve_schema

__all__ = [
    "extract_endpoint_details",
    "generate_mock_from_schema",
    "extract_schema_structure",
    "resolve_schema",
]
