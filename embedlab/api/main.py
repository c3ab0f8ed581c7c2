from __future__ import annotations

from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from ..core.config import settings
from ..core.exceptions import EmbeddingError
from ..core.logger import get_logger
from ..obs.events import record_event
from ..obs.middleware import RequestLoggingMiddleware
from ..services.system import default_system as system

log = get_logger("api")

app = FastAPI(title="Embedlab API", version="0.1.0")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_cors(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging middleware (observability)
app.add_middleware(RequestLoggingMiddleware)

@app.exception_handler(EmbeddingError)
async def embedding_error(request: Request, exc: EmbeddingError):
    request.state.error_kind = type(exc).__name__
    record_event("error", {"path": request.url.path, "error": type(exc).__name__, "detail": str(exc)})
    return JSONResponse(status_code=400, content={"detail": str(exc), "error": type(exc).__name__})

# ----------------- Models -----------------
class InitializeRequest(BaseModel):
    corpus: List[str]
    dimension: int = Field(ge=1, default=settings.embedding_dim)

class InfoResponse(BaseModel):
    vocabularySize: int
    dimension: int
    isInitialized: bool

class EncodeRequest(BaseModel):
    text: str
    dimension: int | None = None

class EncodeResponse(BaseModel):
    vector: List[float]

class DecodeRequest(BaseModel):
    vector: List[float]
    top_k: int = Field(ge=0, default=settings.default_top_k)

class DecodeResponse(BaseModel):
    words: List[str]

class SimilarityRequest(BaseModel):
    a: List[float]
    b: List[float]

class SimilarityResponse(BaseModel):
    cosine: float
    euclidean: float

class SearchRequest(BaseModel):
    query: str
    documents: List[str]
    top_k: int = Field(ge=0, default=settings.default_top_k)

class SearchHit(BaseModel):
    text: str
    score: float
    index: int

class SearchResponse(BaseModel):
    results: List[SearchHit]

class ClusterRequest(BaseModel):
    texts: List[str]
    num_clusters: int = Field(ge=1, default=settings.default_num_clusters)

class ClusterResponse(BaseModel):
    clusters: Dict[int, List[str]]

# ----------------- Endpoints -----------------
@app.get("/health")
async def health():
    return {"ok": True, "env": settings.app_env}

@app.post("/initialize", response_model=InfoResponse)
async def initialize(req: InitializeRequest):
    system.initialize(req.corpus, dimension=req.dimension)
    info = system.get_info()
    record_event("initialize", info.as_dict())
    return InfoResponse(**info.as_dict())

@app.get("/info", response_model=InfoResponse)
async def info():
    return InfoResponse(**system.get_info().as_dict())

@app.post("/encode", response_model=EncodeResponse)
async def encode(req: EncodeRequest):
    vec = system.embed(req.text, dimension=req.dimension)
    return EncodeResponse(vector=vec.tolist())

@app.post("/decode", response_model=DecodeResponse)
async def decode(req: DecodeRequest):
    return DecodeResponse(words=system.decode(req.vector, top_k=req.top_k))

@app.post("/similarity", response_model=SimilarityResponse)
async def similarity(req: SimilarityRequest):
    return SimilarityResponse(
        cosine=system.cosine_similarity(req.a, req.b),
        euclidean=system.euclidean_distance(req.a, req.b),
    )

@app.post("/search", response_model=SearchResponse)
async def semantic_search(req: SearchRequest):
    results = system.semantic_search(req.query, req.documents, top_k=req.top_k)
    record_event("search", {"query": req.query, "documents": len(req.documents), "hits": len(results)})
    return SearchResponse(results=[SearchHit(**r.as_dict()) for r in results])

@app.post("/cluster", response_model=ClusterResponse)
async def cluster(req: ClusterRequest):
    clusters = system.cluster(req.texts, num_clusters=req.num_clusters)
    return ClusterResponse(clusters=clusters)

@app.get("/model/export")
async def export_model():
    return PlainTextResponse(system.export_model(), media_type="application/json")

@app.post("/model/import", response_model=InfoResponse)
async def import_model(request: Request):
    blob = await request.body()
    system.import_model(blob)
    info = system.get_info()
    log.info("Model imported: %s", info.as_dict())
    record_event("import", info.as_dict())
    return InfoResponse(**info.as_dict())
