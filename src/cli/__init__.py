"""분리기 CLI 패키지. 진입점은 __main__.py."""
