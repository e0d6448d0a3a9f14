from __future__ import annotations

from connect4_console.main import main

if __name__ == "__main__":
    raise SystemExit(main())
