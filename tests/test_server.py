import os
import signal
import socket
import subprocess
import sys
import time

import httpx
import pytest

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _wait_until_serving(proc, url, timeout=15.0):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if proc.poll() is not None:
            raise AssertionError(f"server exited early with {proc.returncode}")
        try:
            if httpx.get(url, timeout=0.5).status_code == 200:
                return
        except httpx.HTTPError:
            pass
        time.sleep(0.1)
    raise AssertionError("server did not start in time")


@pytest.fixture
def server_process():
    port = _free_port()
    env = dict(os.environ, LOG_PROXY_HOST="127.0.0.1", LOG_PROXY_PORT=str(port), NO_COLOR="1")
    proc = subprocess.Popen(
        [sys.executable, "-m", "log_proxy"],
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    try:
        _wait_until_serving(proc, f"http://127.0.0.1:{port}/")
        yield proc
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.communicate()


class TestShutdown:
    @pytest.mark.parametrize("sig", [signal.SIGTERM, signal.SIGINT])
    def test_signal_exits_cleanly(self, server_process, sig):
        server_process.send_signal(sig)
        stdout, _ = server_process.communicate(timeout=15)

        assert server_process.returncode == 0
        assert "INFO: Log Proxy Server Started!" in stdout
        assert "INFO: Shutting down log proxy server..." in stdout
