import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .clients.http import get_api_client
from .core.config import settings
from .core.loggers import configure_logging
from .routers.analytics import router as analytics_router
from .routers.categories import router as categories_router
from .routers.inventory import router as inventory_router
from .routers.transactions import router as transactions_router
from .routers.users import router as users_router
from .routers.weights import router as weights_router
from .services.inventory import InventoryAccessor
from .services.status import InventoryStatusMonitor
from .services.users import UserCache

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Using remote store at %s", settings.api_url)
    app.state.status_monitor.start()
    yield
    app.state.status_monitor.stop()


app = FastAPI(
    title="Stockledger API",
    description="Inventory and transaction tracker",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Long-lived state owned by the app: the user list cache and the stock alert snapshot
app.state.user_cache = UserCache(settings.users_cache_ttl)
app.state.status_monitor = InventoryStatusMonitor(InventoryAccessor(get_api_client()))

app.include_router(users_router, prefix="/users", tags=["users"])
app.include_router(categories_router, prefix="/categories", tags=["categories"])
app.include_router(weights_router, prefix="/weights", tags=["weights"])
app.include_router(inventory_router, prefix="/inventory", tags=["inventory"])
app.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
app.include_router(analytics_router, prefix="/analytics", tags=["analytics"])

if __name__ == "__main__":
    uvicorn.run("stockledger.main:app", host="0.0.0.0", port=8080, reload=True)
