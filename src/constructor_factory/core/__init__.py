# src/constructor_factory/core/__init__.py
"""
Core do Constructor Factory.

Este pacote contém a implementação canônica da materialização de
entidades a partir de registros tabulares.

Componentes principais:
    - descriptor   → descrição imutável de tipos (candidatos e propriedades)
    - record       → registros tabulares e adapters de fontes
    - resolver     → escolha do construtor mais específico
    - materializer → invocação do construtor e atribuição de propriedades
    - batch        → materialização fail-fast de sequências de registros
    - factory      → composição resolver + materializer por tipo e política
    - config       → carregamento de configuração e política

Princípios fundamentais:
    - Transformação pura, síncrona e em memória
    - Comparação de nomes sempre case-insensitive por igualdade
    - Erros da própria entidade atravessam o core sem encapsulamento

Limites explícitos:
    - Não persiste entidades
    - Não constrói coleções, objetos aninhados ou grafos
"""
