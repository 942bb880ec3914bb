"""GL なしで LineSurface/LineMesh を動かすためのダミー ModernGL コンテキスト。"""

from __future__ import annotations

from typing import Any


class DummyUniform:
    def __init__(self) -> None:
        self.value: Any = None
        self.written: bytes | None = None

    def write(self, data: bytes) -> None:
        self.written = data


class DummyProgram:
    def __init__(self, vertex_shader: str, fragment_shader: str) -> None:
        self.vertex_shader = vertex_shader
        self.fragment_shader = fragment_shader
        self.uniforms: dict[str, DummyUniform] = {}
        self.released = False

    def __getitem__(self, name: str) -> DummyUniform:
        return self.uniforms.setdefault(name, DummyUniform())

    def release(self) -> None:
        self.released = True


class DummyBuffer:
    def __init__(self, reserve: int) -> None:
        self.size = int(reserve)
        self.data = b""
        self.orphans = 0
        self.released = False

    def orphan(self) -> None:
        self.orphans += 1

    def write(self, data: bytes) -> None:
        self.data = data

    def release(self) -> None:
        self.released = True


class DummyVAO:
    def __init__(self, buffer: DummyBuffer) -> None:
        self.buffer = buffer
        self.renders: list[tuple[Any, int]] = []
        self.released = False

    def render(self, mode: Any, vertices: int) -> None:
        self.renders.append((mode, vertices))

    def release(self) -> None:
        self.released = True


class DummyContext:
    def __init__(self) -> None:
        self.buffers: list[DummyBuffer] = []
        self.vaos: list[DummyVAO] = []

    def program(self, vertex_shader: str, fragment_shader: str) -> DummyProgram:
        return DummyProgram(vertex_shader, fragment_shader)

    def buffer(self, reserve: int, dynamic: bool = False) -> DummyBuffer:
        buf = DummyBuffer(reserve)
        self.buffers.append(buf)
        return buf

    def simple_vertex_array(self, program: Any, buffer: DummyBuffer, *attrs: str) -> DummyVAO:
        vao = DummyVAO(buffer)
        self.vaos.append(vao)
        return vao
