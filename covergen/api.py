"""
API Blueprint - cover letter generation

A generation request runs as an ordered pipeline of steps over a
GenerationContext. Each step either fills in part of the context or raises a
GenerationError, which ends the request with that error's status and message.
"""
import os
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.formparser import parse_form_data

from covergen.errors import (
    FormParseError,
    GenerationError,
    MethodNotAllowed,
    MissingCredential,
    MissingFields,
)
from covergen.forms import GenerationRequest, normalize
from covergen.prompts import build_prompt
from covergen.services.openai_service import client_ready, generate_completion
from covergen.services.pdf_service import extract_pdf_text

api_bp = Blueprint("api", __name__)

FORM_MIMETYPES = ("multipart/form-data", "application/x-www-form-urlencoded")

# Registered for every method so wrong-method requests get the JSON error body
GENERATE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@dataclass
class GenerationContext:
    method: str
    api_key: str = ""
    model: Optional[str] = None
    temperature: Optional[float] = None
    timeout: float = 60.0
    form: Optional[GenerationRequest] = None
    resume_text: Optional[str] = None
    job_text: Optional[str] = None
    prompt: str = ""
    result: str = ""


def credential() -> str:
    """OpenAI key, read per request so a restart isn't needed after setting it."""
    key = current_app.config.get("OPENAI_API_KEY") or os.getenv("OPENAI_API_KEY", "")
    return key.strip()


# ============ Pipeline Steps ============

def check_method(ctx: GenerationContext) -> None:
    if ctx.method != "POST":
        raise MethodNotAllowed()


def parse_form(ctx: GenerationContext) -> None:
    if request.mimetype not in FORM_MIMETYPES:
        raise FormParseError()
    try:
        _, form, files = parse_form_data(
            request.environ,
            max_content_length=current_app.config.get("MAX_CONTENT_LENGTH"),
            silent=False,
        )
    except RequestEntityTooLarge:
        raise
    except Exception as e:
        current_app.logger.warning("Form parse failed: %s: %s", type(e).__name__, e)
        raise FormParseError() from e
    ctx.form = GenerationRequest.from_form(form, files)


def extract_uploads(ctx: GenerationContext) -> None:
    if ctx.form.resume_file:
        ctx.resume_text = extract_pdf_text(ctx.form.resume_file, field="resumeFile")
    if ctx.form.job_file:
        ctx.job_text = extract_pdf_text(ctx.form.job_file, field="jobFile")


def normalize_fields(ctx: GenerationContext) -> None:
    ctx.form = normalize(ctx.form, resume_text=ctx.resume_text, job_text=ctx.job_text)


def validate(ctx: GenerationContext) -> None:
    ok, msg = client_ready(ctx.api_key)
    if not ok:
        current_app.logger.error("Generation unavailable: %s", msg)
        raise MissingCredential()
    missing = ctx.form.missing_fields()
    if missing:
        raise MissingFields(missing)


def render_prompt(ctx: GenerationContext) -> None:
    ctx.prompt = build_prompt(ctx.form)


def complete(ctx: GenerationContext) -> None:
    ctx.result = generate_completion(
        ctx.prompt,
        ctx.api_key,
        model=ctx.model,
        temperature=ctx.temperature,
        timeout=ctx.timeout,
    )


PIPELINE: Sequence[Callable[[GenerationContext], None]] = (
    check_method,
    parse_form,
    extract_uploads,
    normalize_fields,
    validate,
    render_prompt,
    complete,
)


def run_pipeline(ctx: GenerationContext, steps=PIPELINE) -> GenerationContext:
    for step in steps:
        step(ctx)
    return ctx


# ============ API Routes ============

@api_bp.route("/api/generate", methods=GENERATE_METHODS, provide_automatic_options=False)
@api_bp.route("/generate", methods=GENERATE_METHODS, provide_automatic_options=False)
def generate():
    """Generate qualification bullets and a cover letter from the submitted form"""
    cfg = current_app.config
    ctx = GenerationContext(
        method=request.method,
        api_key=credential(),
        model=cfg.get("OPENAI_MODEL"),
        temperature=cfg.get("OPENAI_TEMPERATURE"),
        timeout=cfg.get("OPENAI_TIMEOUT", 60.0),
    )
    run_pipeline(ctx)
    current_app.logger.info(
        "Generated cover letter (resume_pdf=%s, job_pdf=%s, prompt_chars=%d, output_chars=%d)",
        ctx.resume_text is not None,
        ctx.job_text is not None,
        len(ctx.prompt),
        len(ctx.result),
    )
    return jsonify({"result": ctx.result}), 200


@api_bp.errorhandler(GenerationError)
def handle_generation_error(e: GenerationError):
    if e.status_code >= 500:
        current_app.logger.error("Generation failed (%s): %s", type(e).__name__, e.message)
    else:
        current_app.logger.warning("Generation rejected (%s): %s", type(e).__name__, e.message)
    return jsonify(e.to_dict()), e.status_code
