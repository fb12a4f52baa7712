from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from dotenv import load_dotenv

from models import ErrorResponse, Option, OptionsResponse, PoemRequest, PoemResponse
from services.errors import ValidationError
from services.generation_client import GenerationClient
from services.poem_service import PoemService, validate_selection

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = FastAPI(title="Medieval Verse API")

# Configuration
POLLINATIONS_BASE_URL = os.getenv("POLLINATIONS_BASE_URL", "https://text.pollinations.ai")
POLLINATIONS_MODEL = os.getenv("POLLINATIONS_MODEL", "openai")
GENERATION_TIMEOUT_SECONDS = float(os.getenv("GENERATION_TIMEOUT_SECONDS", "10"))
STATIC_DIR = os.getenv("STATIC_DIR", "static")

GENERIC_FAILURE = "Failed to generate poem. Please try again."

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Services
poem_service = PoemService(
    GenerationClient(
        base_url=POLLINATIONS_BASE_URL,
        model=POLLINATIONS_MODEL,
        timeout=GENERATION_TIMEOUT_SECONDS,
    )
)

# Data
OPTIONS = OptionsResponse(
    characters=[
        Option(id="hero", label="Hero of Legend"),
        Option(id="noble", label="Noble Lord/Lady"),
        Option(id="commoner", label="Humble Commoner"),
    ],
    locations=[
        Option(id="castle", label="Mighty Castle"),
        Option(id="forest", label="Enchanted Forest"),
        Option(id="village", label="Peaceful Village"),
    ],
    events=[
        Option(id="battle", label="Epic Battle"),
        Option(id="love", label="Forbidden Love"),
        Option(id="treachery", label="Dark Treachery"),
    ],
    emotions=[
        Option(id="joy", label="Boundless Joy"),
        Option(id="sorrow", label="Deep Sorrow"),
        Option(id="rage", label="Righteous Rage"),
    ],
    languages=[
        Option(id="english", label="English (Archaic)"),
        Option(id="chinese", label="Classical Chinese"),
    ],
)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies get the same shape as incomplete selections
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


@app.get("/api/options", response_model=OptionsResponse)
def get_options():
    return OPTIONS


@app.post(
    "/api/generate-poem",
    response_model=PoemResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_poem(poem_req: PoemRequest):
    try:
        selection = validate_selection(poem_req)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))

    try:
        return poem_service.generate_poem(selection)
    except Exception as e:
        logger.exception(f"Error generating poem: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_FAILURE)


# Mount assets/static files
# The built frontend is copied to STATIC_DIR with its bundles under assets/
if os.path.isdir(os.path.join(STATIC_DIR, "assets")):
    app.mount(
        "/assets", StaticFiles(directory=os.path.join(STATIC_DIR, "assets")), name="assets"
    )


@app.get("/{full_path:path}")
def serve_spa(full_path: str):
    # If not found in API or static assets, serve index.html
    index_path = os.path.join(STATIC_DIR, "index.html")
    if os.path.exists(index_path):
        with open(index_path, "r", encoding="utf-8") as f:
            return HTMLResponse(content=f.read())
    return Response(content="Frontend not found", status_code=404)
