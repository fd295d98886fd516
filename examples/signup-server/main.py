"""Example ticketing auth server using ticketing-auth.

Exposes POST /api/users/signup, which validates the email/password pair,
rejects duplicate accounts and stores a salted Argon2id credential.

Run:  uvicorn main:app --reload --port 8000
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ticketing_auth import TicketingAuth, install_error_handlers

logging.basicConfig(level=logging.INFO)

auth = TicketingAuth(
    database_url=os.environ.get(
        "DATABASE_URL",
        "sqlite+aiosqlite:///./ticketing_auth.db",
    ),
    # --- Registration control ---
    # allow_signup=False,  # disable /api/users/signup (invite-only mode);
    #                      # auth.create_user() keeps working
    # password_policy=PasswordPolicy(min_length=8, max_length=64),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await auth.migrate()
    yield
    await auth.dispose()


app = FastAPI(title="Ticketing Auth Server", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Event hooks — fire AFTER the DB transaction commits. Errors are logged,
# never propagate.
# ---------------------------------------------------------------------------


@auth.on("user_created")
async def on_user_created(event):
    """Send a welcome email, publish to the event bus, etc."""
    print(f"[hook] New user created: {event.email} ({event.user_id})")


# ---------------------------------------------------------------------------
# Mount router and error handlers
# ---------------------------------------------------------------------------

# /api/users/signup
app.include_router(auth.fastapi_router(), prefix="/api/users")

# {"errors": [{"message": ..., "code": ..., "field": ...}]} for every failure
install_error_handlers(app)


@app.get("/")
async def root():
    return {"message": "Ticketing Auth Server", "docs": "/docs"}
