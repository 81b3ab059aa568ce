import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from core.config import settings
from core.database import create_db_and_tables
from core.exceptions import register_exception_handlers
from routes.users import router as users_router
from routes.organization import router as organization_router
from routes.subscriptions import router as subscriptions_router
from routes.customers import router as customers_router
from routes.projects import router as project_router
from routes.time_entries import router as time_entries_router
from routes.dashboard import router as dashboard_router

logger = logging.getLogger(__name__)


# =========================================
# 🏁 Lifespan (DB initialization)
# =========================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL)
    create_db_and_tables()
    logger.info("✅ Database tables created on startup.")
    yield
    logger.info("✅ Application shutting down.")

# =========================================
#  ✅ FastAPI App
# =========================================
app = FastAPI(lifespan=lifespan, title="TimeLedger Backend", debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# =========================================
# 📦 Routers
# =========================================
app.include_router(users_router, prefix="/users")
app.include_router(organization_router, prefix="/organizations")
app.include_router(subscriptions_router, prefix="/subscriptions")
app.include_router(customers_router, prefix="/customers")
app.include_router(project_router, prefix="/projects")
app.include_router(time_entries_router, prefix="/time-entries")
app.include_router(dashboard_router, prefix="/dashboard")


# =========================================
# 🩺 Health Check
# =========================================
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "Backend is running"}


@app.get("/")
def read_root():
    return {"message": "Welcome to TimeLedger Backend!"}
