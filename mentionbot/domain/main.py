from fastapi import FastAPI

from .controller import slack_router, health_router


app = FastAPI(title="Slack Mention Bot")
app.include_router(slack_router)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
