from contextlib import asynccontextmanager

import httpx
from fastapi import Body, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from . import config
from .errors import GitHubDecodeError, GitHubTransportError
from .facade import GitHubFacade
from .models import Gist

config.configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # one pooled client for the life of the desktop session
    async with httpx.AsyncClient() as client:
        app.state.facade = GitHubFacade(client)
        yield


app = FastAPI(title="GitHub Desk API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GitHubTransportError)
async def transport_error(request: Request, exc: GitHubTransportError):
    return JSONResponse(status_code=502, content={"detail": f"GitHub unreachable: {exc}"})


@app.exception_handler(GitHubDecodeError)
async def decode_error(request: Request, exc: GitHubDecodeError):
    return JSONResponse(status_code=502, content={"detail": f"{exc}: {exc.excerpt}"})


def facade(request: Request) -> GitHubFacade:
    return request.app.state.facade


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.get("/api/greet")
async def greet(request: Request, name: str = ""):
    return facade(request).greet(name)


@app.get("/api/repositories")
async def public_repositories(request: Request):
    return await facade(request).get_public_repositories()


@app.get("/api/gists/public")
async def public_gists(request: Request):
    return await facade(request).get_public_gists()


@app.get("/api/user/repos")
async def user_repositories(request: Request, x_github_token: str = Header(default="")):
    return await facade(request).get_repositories_for_authenticated_user(x_github_token)


@app.get("/api/user/gists")
async def user_gists(request: Request, x_github_token: str = Header(default="")):
    return await facade(request).get_gists_for_authenticated_user(x_github_token)


@app.get("/api/more")
async def more_information(request: Request, url: str, x_github_token: str = Header(default="")):
    return await facade(request).get_more_information_from_url(url, x_github_token)


@app.get("/api/gists/content", response_class=PlainTextResponse)
async def gist_content(request: Request, url: str, x_github_token: str = Header(default="")):
    return await facade(request).get_gist_content(url, x_github_token)


@app.post("/api/gists")
async def create_gist(request: Request, gist: Gist = Body(...), x_github_token: str = Header(default="")):
    return await facade(request).create_new_gist(gist, x_github_token)
