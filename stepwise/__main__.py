"""
Same as the `stepwise` console script:

    py -m stepwise factorial --max-steps 5000
"""
from stepwise.cmdline import main

main()
