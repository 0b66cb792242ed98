"""Host adapters for the redirect service: Lambda handler and FastAPI app."""
