import sys
from typing import List

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

import config
from agents import detail_analysis_agent, problem_statement_agent
from agents.detail_analysis_agent import DetailAnalysisAgent
from agents.problem_statement_agent import ProblemStatementAgent
from errors import StartupError, UpstreamError, ValidationError
from models import DetailRequest, DetailResult, ErrorResponse, GenerateRequest, ProblemStatement
from utils.llm import call_llm

app = FastAPI(title="Problem Discovery API", version="1.0.0")

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Malformed bodies on these routes are reported like missing fields
MISSING_INPUT_MESSAGES = {
    "/generate": problem_statement_agent.MISSING_INPUT_MESSAGE,
    "/generate-detail": detail_analysis_agent.MISSING_INPUT_MESSAGE,
}


def check_api_key():
    if not config.GEMINI_API_KEY:
        raise StartupError("GEMINI_API_KEY missing in .env")


@app.on_event("startup")
def startup():
    check_api_key()
    print("[STARTUP] ✅ Gemini backend ready, model:", config.GEMINI_MODEL)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = MISSING_INPUT_MESSAGES.get(request.url.path)
    if message is None:
        return await request_validation_exception_handler(request, exc)
    return JSONResponse({"error": message}, status_code=400)


def get_llm():
    return call_llm


# 🔧 Health checks
@app.get("/", response_class=PlainTextResponse)
def root():
    return "✅ Gemini backend running (Problem Statement Mode)"


@app.get("/health")
def health_check():
    return {"status": "ok"}


# 🧠 Step 1: 15 real problem statements for a user profile
@app.post(
    "/generate",
    responses={
        200: {"model": List[ProblemStatement]},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def generate(request: GenerateRequest, llm=Depends(get_llm)):
    agent = ProblemStatementAgent(llm)
    try:
        return agent.run(request)
    except ValidationError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except UpstreamError as e:
        print("[GEMINI ERROR] ❌ (/generate):", e)
        return JSONResponse(
            {"error": "Failed to generate problem statements", "message": str(e)},
            status_code=500,
        )


# 📄 Step 2: detailed analysis of a selected problem
@app.post(
    "/generate-detail",
    response_model=DetailResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_detail(request: DetailRequest, llm=Depends(get_llm)):
    agent = DetailAnalysisAgent(llm)
    try:
        return agent.run(request)
    except ValidationError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except UpstreamError as e:
        print("[GEMINI ERROR] ❌ (/generate-detail):", e)
        return JSONResponse(
            {"error": "Failed to generate detailed problem analysis", "message": str(e)},
            status_code=500,
        )


if __name__ == "__main__":
    try:
        check_api_key()
    except StartupError as e:
        print(f"[STARTUP] 🚨 ERROR: {e}")
        sys.exit(1)
    print(f"✅ Server running at http://localhost:{config.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
