import io
import os
import tempfile
from typing import Annotated, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse
from pydantic import BaseModel
from starlette.background import BackgroundTask

from ..comparer.comparer import ASequenceComparer, SequenceComparer
from ..constants.constants import KMERSIZE, MAX_KMERSIZE
from ..errors import D2Error
from ..models.comparer import ComparerInput, ComparerOutput
from ..models.config import AmbiguityPolicy


class MatrixResponse(BaseModel):
    kmerSize: int
    ambiguityPolicy: AmbiguityPolicy
    queryIds: List[str]
    targetIds: List[str]
    scores: List[List[float]]


app = FastAPI(title="bblast")
comparer: ASequenceComparer = SequenceComparer()


def _readUpload(upload: Optional[UploadFile]) -> Optional[io.StringIO]:
    if upload is None:
        return None
    try:
        return io.StringIO(upload.file.read().decode("utf-8"))
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=422, detail=f"{upload.filename} is not UTF-8 text: {e}")


def _runComparison(comparerInput: ComparerInput) -> ComparerOutput:
    try:
        return comparer.compare(comparerInput)
    except D2Error as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/")
async def root():
    return {"message": "bblast D2 service"}


@app.post("/d2/matrix")
def computeMatrix(
    query: UploadFile,
    target: Annotated[Optional[UploadFile], File()] = None,
    kmerSize: Annotated[int, Form(ge=1, le=MAX_KMERSIZE)] = KMERSIZE,
    ambiguityPolicy: Annotated[AmbiguityPolicy, Form()] = AmbiguityPolicy.SKIP_WINDOW,
    symmetric: Annotated[bool, Form()] = False,
    ):
    queryText = _readUpload(query)
    targetText = _readUpload(target)

    outputFileName: str = "D2Matrix.tsv"
    outputDescriptor, outputFileLocation = tempfile.mkstemp(suffix=".tsv")
    os.close(outputDescriptor)

    comparerInput = ComparerInput(
        query=queryText,
        target=targetText,
        outputLocation=outputFileLocation,
        kmerSize=kmerSize,
        ambiguityPolicy=ambiguityPolicy,
        symmetric=symmetric,
    )
    try:
        comparerOutput = _runComparison(comparerInput)
    except HTTPException:
        os.remove(outputFileLocation)
        raise

    rows, cols = comparerOutput.scoreMatrix.shape
    headers = {
        "Matrix-Shape": f"{rows}x{cols}",
        "Access-Control-Expose-Headers": "Matrix-Shape",
    }

    return FileResponse(
        path=outputFileLocation,
        filename=outputFileName,
        headers=headers,
        media_type="text/tab-separated-values",
        background=BackgroundTask(os.remove, outputFileLocation),
    )


@app.post("/d2/scores", response_model=MatrixResponse)
def computeScores(
    query: UploadFile,
    target: Annotated[Optional[UploadFile], File()] = None,
    kmerSize: Annotated[int, Form(ge=1, le=MAX_KMERSIZE)] = KMERSIZE,
    ambiguityPolicy: Annotated[AmbiguityPolicy, Form()] = AmbiguityPolicy.SKIP_WINDOW,
    symmetric: Annotated[bool, Form()] = False,
    ):
    comparerInput = ComparerInput(
        query=_readUpload(query),
        target=_readUpload(target),
        outputLocation=os.devnull,
        kmerSize=kmerSize,
        ambiguityPolicy=ambiguityPolicy,
        symmetric=symmetric,
    )
    comparerOutput = _runComparison(comparerInput)

    return MatrixResponse(
        kmerSize=kmerSize,
        ambiguityPolicy=ambiguityPolicy,
        queryIds=comparerOutput.queryIds,
        targetIds=comparerOutput.targetIds,
        scores=comparerOutput.scoreMatrix.tolist(),
    )
