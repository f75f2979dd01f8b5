from fastapi import FastAPI, Request
import logging
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .analyzer import ProfileAnalyzer
from .errors import AnalysisError
from .platforms import detect_platform
from .types import AnalysisResult, AnalyzeRequest
from .logging_config import init_logging


init_logging()
logger = logging.getLogger("fakecheck.api")
app = FastAPI(title="fakecheck")

# built once at process start; holds no per-request state
analyzer = ProfileAnalyzer()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    if exc.status_code >= 500:
        logger.error("analysis failed category=%s: %s", exc.category, exc)
    else:
        logger.warning("analysis rejected category=%s: %s", exc.category, exc)
    return JSONResponse({"error": exc.category, "message": str(exc)}, status_code=exc.status_code)


@app.get("/health")
async def health():
    logger.debug("/health")
    return {"ok": True}


@app.post("/api/analyze", response_model=AnalysisResult)
async def api_analyze(body: AnalyzeRequest):
    url = (body.url or "").strip()
    if not url:
        return JSONResponse({"error": "invalid_request", "message": "URL is required"}, status_code=400)
    platform = detect_platform(url)
    logger.info("/api/analyze url=%s platform=%s", url, platform)
    try:
        return await analyzer.analyze_async(url, platform)
    except AnalysisError:
        raise
    except Exception as e:
        logger.exception("analyze failed url=%s: %s", url, e)
        return JSONResponse({"error": "analysis_failed", "message": str(e)}, status_code=500)
