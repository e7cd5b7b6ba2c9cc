from app.app_config import get_app_environ_config
from app.schemas.init import init_beanie_odm
from app.shared.storage.mongo import get_mongo_client


async def init_schema():
    mongo_client = get_mongo_client(get_app_environ_config().WATCH_MONGO_LABEL)
    db = mongo_client.get_default_database("watchlinks")
    await init_beanie_odm(db)


if __name__ == "__main__":
    import asyncio

    asyncio.run(init_schema())
