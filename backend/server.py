import os
import uvicorn

if __name__ == "__main__":
    # Settings first, so the logger picks up the configured log directory
    from config import settings
    settings.setup_environment()

    os.makedirs(settings.USER_DATA_DIR, exist_ok=True)

    from main import app

    port = settings.PORT

    print(f"Starting Song Catalog Server on port {port}...")
    print(f"Database: {settings.DB_PATH}")
    uvicorn.run(app, host=settings.HOST, port=port, reload=False, workers=1)
