"""SmarterGPT: FastAPI transport for the smart pipeline."""

import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from smartergpt.config import load_settings
from smartergpt.graph import run_smart_pipeline
from smartergpt.utils.validator import validate_question

PORT = 8080

app = FastAPI(
    title="SmarterGPT",
    description="Drafts several answers, researches their flaws and resolves them into one",
    version="0.1.0",
)


class ConversationRequest(BaseModel):
    question: str = ""


@app.get("/health")
def health_check():
    return {"status": "ok", "api_key_set": bool(load_settings().api_key)}


@app.post("/conversation")
def conversation(request: ConversationRequest):
    """Run the pipeline for one question; every request gets its own dialogue."""
    try:
        question = validate_question(request.question)
    except ValueError as exc:
        return JSONResponse(status_code=418, content={"question": str(exc)})

    result = run_smart_pipeline(question)
    return {"result": result.to_dict()}


def main() -> None:
    print(f"[SmartGPT] Server running on port {PORT}", file=sys.stderr)
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
