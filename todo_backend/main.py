import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from .config import settings
from .exceptions import TaskNotFoundError
from .storage.task_store import TaskStore
from .api import tasks

# 配置日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时初始化内存存储（每次启动都重置为初始任务）
    app.state.task_store = TaskStore.seeded()
    logger.info("🚀 Todo API 启动")
    logger.info(f"📦 初始任务数: {len(app.state.task_store.list_all())}")
    yield
    # 关闭时清理
    app.state.task_store.clear()
    logger.info("👋 Todo API 关闭")


app = FastAPI(
    title=settings.app_name,
    description="基于内存存储的任务管理 API",
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 配置（允许任意来源）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskNotFoundError)
async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
    logger.warning(f"任务不存在: {exc.task_id} ({request.method} {request.url.path})")
    return JSONResponse(status_code=404, content={"error": "Task not found"})


# 路由注册
app.include_router(tasks.router, prefix=settings.api_prefix, tags=["任务管理"])


@app.get("/", summary="服务信息", tags=["系统"])
async def root():
    """获取 API 服务信息"""
    return {"message": "Todo API is running", "version": settings.version}


@app.get("/health", summary="健康检查", tags=["系统"])
async def health():
    """检查服务健康状态"""
    return {"status": "healthy"}


def run() -> None:
    """单 worker 启动（内存存储不能跨进程共享）"""
    import uvicorn
    uvicorn.run(
        "todo_backend.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
