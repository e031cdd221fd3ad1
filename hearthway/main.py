from fastapi import FastAPI
from hearthway.core.config import settings
from hearthway.core.log_config import configure_logging
from hearthway.api.v1.routes.balances import router as balances_router
from hearthway.api.v1.routes.expense import router as expense_router

configure_logging()

app = FastAPI(title=settings.APP_NAME)

@app.get("/")
async def root():
    return {"message": "Hearthway balances service is live"}

app.include_router(balances_router, prefix=f"{settings.API_PREFIX}/balances")
app.include_router(expense_router, prefix=f"{settings.API_PREFIX}/expense")
