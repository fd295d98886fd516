"""Vulture whitelist — false positives that are actually used by frameworks."""

# ---------------------------------------------------------------------------
# Public API methods on TicketingAuth (used by consumers, not internally)
# ---------------------------------------------------------------------------
from ticketing_auth.ticketing_auth import TicketingAuth

TicketingAuth.on
TicketingAuth.add_hook
TicketingAuth.check_password
TicketingAuth.delete_user
TicketingAuth.fastapi_router
TicketingAuth.migrate

# ---------------------------------------------------------------------------
# FastAPI route handlers and exception handlers (registered, not called directly)
# ---------------------------------------------------------------------------
_.signup_endpoint
_.http_exception_handler
_.validation_exception_handler
_.hashing_error_handler

# ---------------------------------------------------------------------------
# Pydantic / dataclass / model fields (used for serialization)
# ---------------------------------------------------------------------------
_.timestamp
_.updated_at
_.model_config

# ---------------------------------------------------------------------------
# Alembic migration variables (required by Alembic framework)
# ---------------------------------------------------------------------------
_.revision
_.down_revision
_.branch_labels
_.depends_on
_.downgrade

# ---------------------------------------------------------------------------
# SQLAlchemy TypeDecorator (required by SQLAlchemy framework)
# ---------------------------------------------------------------------------
from ticketing_auth.utils import TZDateTime

TZDateTime.impl
TZDateTime.cache_ok
TZDateTime.process_bind_param
TZDateTime.process_result_value
_.dialect  # required param in TypeDecorator.process_result_value
