# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from .app import main

main()
