from __future__ import annotations
from pathlib import Path
import threading
import time
import typer
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

from entity_agent.commands.convert import run_convert
from entity_agent.options import GenerationOptions

SQL_SUFFIXES = {".sql", ".ddl"}

class Handler(FileSystemEventHandler):
    def __init__(self, out_dir: Path | None, options: GenerationOptions, debounce: float = 0.8):
        self.out_dir = out_dir
        self.options = options
        self.debounce = debounce
        self._pending: dict[str, float] = {}
        self._lock = threading.Lock()

    def on_any_event(self, event):
        if event.is_directory or event.event_type == "deleted":
            return
        # 임시 파일에 쓰고 rename 하는 에디터는 moved 이벤트의 dest_path가 실제 파일
        p = Path(getattr(event, "dest_path", None) or event.src_path)
        if p.suffix.lower() not in SQL_SUFFIXES:
            return

        # 저장 한 번에 이벤트가 여러 번 오므로 마지막 이벤트 시각만 기록
        with self._lock:
            self._pending[str(p)] = time.monotonic()

    def flush_due(self, now: float | None = None) -> list[str]:
        """마지막 이벤트 이후 debounce 동안 조용했던 파일만 변환."""
        now = time.monotonic() if now is None else now
        with self._lock:
            due = [p for p, t in self._pending.items() if now - t >= self.debounce]
            for p in due:
                del self._pending[p]

        for p in due:
            run_convert(p, out_dir=self.out_dir, options=self.options)
        return due

def watch_path(path: Path, out_dir: Path | None, options: GenerationOptions) -> None:
    if not path.exists() or not path.is_dir():
        raise typer.BadParameter(f"watch는 존재하는 디렉터리에서 사용하세요: {path}")

    handler = Handler(out_dir, options)
    obs = Observer()
    obs.schedule(handler, str(path), recursive=True)
    obs.start()
    try:
        while True:
            time.sleep(0.2)
            handler.flush_due()
    finally:
        obs.stop()
        obs.join()
