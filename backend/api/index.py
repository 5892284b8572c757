import sys
import os
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

# Add the parent directory to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mangum import Mangum

try:
    from main import app as fastapi_app

    # Export for Vercel
    app = Mangum(fastapi_app, lifespan="off")

except Exception as e:
    print(f"Error during initialization: {e}")
    # Serve the initialization error instead of crashing the function
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse

    error_app = FastAPI()
    init_error = f"Initialization failed: {str(e)}"

    @error_app.api_route("/{path:path}", methods=["GET", "POST"])
    async def catch_all(path: str):
        return JSONResponse(status_code=500, content={"error": init_error})

    app = Mangum(error_app, lifespan="off")
