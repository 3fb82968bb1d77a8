from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routes import doctors_api, listing_api
from services.settings import load_settings
from utils.logging import setup_logging

settings = load_settings()
setup_logging(settings["log_level"])

app = FastAPI(title="Doctor Listing - Filters Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings["allowed_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(doctors_api.router)
app.include_router(listing_api.router)

@app.get("/")
def root():
    return {"status": "ok", "message": "Doctor listing backend is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
