"""
Comparison routes for the Compares API.

Documents arrive as text (JSON bodies) or as uploaded files and are
handed to the comparers as raw bytes.
"""
import logging
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Form

from compares import get_comparer, detect_encoding, generate_report, ComparisonResult
from api.schemas import (
    ComparisonRequest,
    ComparisonResponse,
    FileComparisonResponse,
    IsEqualRequest,
    IsEqualResponse,
    AreEqualRequest,
    AreEqualResponse,
    ErrorResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(responses={400: {"model": ErrorResponse}})


def _encode(text: Optional[str]) -> Optional[bytes]:
    return text.encode("utf-8") if text is not None else None


def _to_response(encoding: str, result: ComparisonResult) -> dict:
    return {"encoding": encoding, **result.to_dict()}


@router.post("", response_model=ComparisonResponse)
async def compare_documents(request: ComparisonRequest):
    """
    Compare two documents and return their top-level key differences.
    """
    comparer = get_comparer(request.encoding)
    result = comparer.compare(_encode(request.x), _encode(request.y))
    return _to_response(comparer.encoding, result)


@router.post("/files", response_model=FileComparisonResponse)
async def compare_files(
    x_file: UploadFile = File(...),
    y_file: UploadFile = File(...),
    encoding: Optional[str] = Form(None)
):
    """
    Compare two uploaded documents.

    The encoding is taken from the form field, or detected from the
    first file's extension.
    """
    from config import settings

    x_name = x_file.filename or "x"
    y_name = y_file.filename or "y"

    comparer = get_comparer(encoding or detect_encoding(x_name, default=settings.DEFAULT_ENCODING))
    logger.info(f"Comparing uploaded files {x_name} vs {y_name} as {comparer.encoding}")

    x_content = await x_file.read()
    y_content = await y_file.read()
    result = comparer.compare(x_content, y_content)

    return {
        **_to_response(comparer.encoding, result),
        "x_file": x_name,
        "y_file": y_name,
        "report": generate_report(x_name, y_name, result, comparer.encoding)
    }


@router.post("/is-equal", response_model=IsEqualResponse)
async def is_equal(request: IsEqualRequest):
    """
    Check whether two documents are byte-identical.
    """
    equal = get_comparer("json").is_equal(_encode(request.x), _encode(request.y))
    return IsEqualResponse(equal=equal)


@router.post("/are-equal", response_model=AreEqualResponse)
async def are_equal(request: AreEqualRequest):
    """
    Check whether a chain of documents are byte-identical, each against
    the one before it.
    """
    equal, index = get_comparer("json").are_equal(*[_encode(item) for item in request.items])
    return AreEqualResponse(equal=equal, first_divergence_index=index)
