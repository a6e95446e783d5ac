# app/main.py

from app import create_app
from app.configs.settings import settings
import uvicorn

app = create_app()

@app.get("/")
def root():
    return {"status": "ok", "name": settings.APP_TITLE, "version": settings.APP_VERSION}


@app.get("/health")
def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
