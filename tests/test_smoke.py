# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Constructor Factory.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o ambiente de testes (pytest) está funcional
- o pacote pode ser importado e expõe sua API pública

Invariantes:
    - Estes testes devem sempre passar em um setup correto
    - Não dependem de configuração, filesystem ou I/O

Limites explícitos:
    - Não testar lógica de negócio
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo do repositório.

    Ele **não valida comportamento de domínio**; serve como sentinela
    de integridade do pacote durante bootstrap, CI e refactors.
    """
    import constructor_factory

    missing = [name for name in constructor_factory.__all__ if not hasattr(constructor_factory, name)]
    assert missing == []
