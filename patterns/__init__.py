"""
Gang-of-Four design pattern examples.

Every example is a module exposing ``main()``; run one with
``python -m patterns.<group>.<pattern>.<example>``.
"""
