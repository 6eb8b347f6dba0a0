import logging

from fastapi import Depends, FastAPI, UploadFile, File, HTTPException, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .decoding import decode_upload
from .errors import InvalidArgumentError
from .markup import delimited_to_markup, to_markup
from .models import (
    ConversionOptions,
    DelimitedRequest,
    ErrorResponse,
    HealthResponse,
    MarkupRequest,
    ParseResponse,
    RecordsResponse,
)
from .records import to_delimited, to_records
from .rules import (
    DEFAULT_HAS_HEADERS,
    DEFAULT_ROOT_NAME,
    DEFAULT_ROW_NAME,
    DEFAULT_SEPARATOR,
    SUPPORTED_UPLOAD_SUFFIXES,
    validate_separator,
)
from .tokenizer import parse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="csv-converter",
    description="Delimited text to records, records to delimited text or XML",
    version="0.1.0",
)

_INVALID = {422: {"model": ErrorResponse}}


@app.exception_handler(InvalidArgumentError)
async def invalid_argument(request: Request, exc: InvalidArgumentError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "argument": exc.argument},
    )


def conversion_options(
    separator: str = Query(DEFAULT_SEPARATOR, description="Single-character field separator"),
    has_headers: bool = Query(DEFAULT_HAS_HEADERS, description="First row holds column names"),
) -> ConversionOptions:
    validate_separator(separator)
    return ConversionOptions(separator=separator, has_headers=has_headers)


async def read_upload(file: UploadFile):
    if not file.filename or not file.filename.lower().endswith(SUPPORTED_UPLOAD_SUFFIXES):
        raise HTTPException(status_code=422, detail="Only delimited text files are supported")

    raw = await file.read()
    text, report = decode_upload(raw)
    logger.info("decoded %s: %d bytes as %s", file.filename, len(raw), report["decode_used"])
    return text, report


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/parse", response_model=ParseResponse, responses=_INVALID)
async def parse_upload(
    file: UploadFile = File(...),
    options: ConversionOptions = Depends(conversion_options),
):
    text, report = await read_upload(file)
    rows = parse(text, options.separator)
    return {"rows": rows, "row_count": len(rows), "decoding": report}


@app.post("/csv-to-json", response_model=RecordsResponse, responses=_INVALID)
async def csv_to_json(
    file: UploadFile = File(...),
    options: ConversionOptions = Depends(conversion_options),
):
    text, report = await read_upload(file)
    records = to_records(text, options.has_headers, options.separator)
    return {
        "records": records,
        "summary": {
            "records": len(records),
            "columns": list(records[0].keys()) if records else [],
            "separator": options.separator,
            "has_headers": options.has_headers,
        },
        "decoding": report,
    }


@app.post("/json-to-csv", response_class=PlainTextResponse, responses=_INVALID)
def json_to_csv(body: DelimitedRequest):
    text = to_delimited(body.records, body.headers, body.separator)
    logger.info("serialized %d records", len(body.records))
    return PlainTextResponse(text, media_type="text/csv")


@app.post("/json-to-xml", responses=_INVALID)
def json_to_xml(body: MarkupRequest):
    xml = to_markup(body.records, body.root_name, body.row_name, strict=body.strict)
    return Response(content=xml, media_type="application/xml")


@app.post("/csv-to-xml", responses=_INVALID)
async def csv_to_xml(
    file: UploadFile = File(...),
    separator: str = Query(DEFAULT_SEPARATOR),
    root_name: str = Query(DEFAULT_ROOT_NAME),
    row_name: str = Query(DEFAULT_ROW_NAME),
):
    text, _ = await read_upload(file)
    xml = delimited_to_markup(text, separator, root_name, row_name)
    return Response(content=xml, media_type="application/xml")
