from dotenv import load_dotenv
from fastapi import FastAPI

from hbasectl.api.middleware import AuthMiddleware
from hbasectl.api.routes import pre_upgrade
from hbasectl.logging import setup_logger

load_dotenv()
setup_logger("hbasectl")

app = FastAPI(title="hbasectl")
app.add_middleware(AuthMiddleware)

app.include_router(pre_upgrade.router)
