from fastapi import APIRouter
from loguru import logger
from pymongo.errors import PyMongoError

from app.app_config import get_app_environ_config
from app.utils.app_errors import AppErrorCode

from ..storage.mongo import get_mongo_client
from .utils import ApiSuccess, api_failure, make_response

router = APIRouter()


@router.get("/health", response_model=ApiSuccess)
async def health():
    return ApiSuccess(results="OK")


@router.get("/health/ready")
async def ready():
    """Readiness probe: the watch-link store must answer a ping."""
    label = get_app_environ_config().WATCH_MONGO_LABEL
    try:
        await get_mongo_client(label).admin.command("ping")
    except (PyMongoError, ValueError) as e:
        logger.warning("Readiness check failed for mongo label '{}': {}", label, e)
        return make_response(api_failure(AppErrorCode.E_STORE_UNAVAILABLE.value, errmesg=str(e)), status_code=503)

    return ApiSuccess(results="OK")
