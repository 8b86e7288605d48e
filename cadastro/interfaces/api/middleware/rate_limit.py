# cadastro/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from cadastro.infrastructure.config import get_settings

_JANELA_SEGUNDOS = 60.0
_RESPOSTA_429 = '{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}'


class JanelaDeslizante:
    """Contagem de requisicoes por cliente nos ultimos `janela` segundos.

    Invariante: nenhum cliente fica no mapa sem requisicao dentro da janela
    por mais de uma janela. A varredura completa roda no maximo uma vez por
    janela, entao o custo por requisicao continua O(requisicoes do cliente).
    """

    def __init__(self, janela: float = _JANELA_SEGUNDOS) -> None:
        self._janela = janela
        self._por_cliente: dict[str, list[float]] = {}
        self._ultima_varredura = 0.0

    def __len__(self) -> int:
        return len(self._por_cliente)

    def _recentes(self, cliente: str, agora: float) -> list[float]:
        return [t for t in self._por_cliente.get(cliente, ()) if agora - t < self._janela]

    def _varrer(self, agora: float) -> None:
        for cliente in list(self._por_cliente):
            recentes = self._recentes(cliente, agora)
            if recentes:
                self._por_cliente[cliente] = recentes
            else:
                del self._por_cliente[cliente]
        self._ultima_varredura = agora

    def permitir(self, cliente: str, limite: int, agora: float) -> bool:
        """Registra a requisicao e devolve False se o cliente ja atingiu o limite."""
        if agora - self._ultima_varredura >= self._janela:
            self._varrer(agora)

        recentes = self._recentes(cliente, agora)
        if len(recentes) >= limite:
            self._por_cliente[cliente] = recentes
            return False

        recentes.append(agora)
        self._por_cliente[cliente] = recentes
        return True


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self.janela = JanelaDeslizante()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes); X-API-Key = integracoes internas
        if limite == 0 or request.headers.get("X-API-Key"):
            return await call_next(request)

        cliente = request.client.host if request.client else "unknown"
        if not self.janela.permitir(cliente, limite, time.time()):
            return Response(content=_RESPOSTA_429, status_code=429, media_type="application/json")
        return await call_next(request)
