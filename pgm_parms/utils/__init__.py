"""
Program support utilities, for programs using pgm_parms:

- printer    : timestamped printing, variable printing, q/d gating, headers
- log_config : setup of the printer and stream loggers
- cmd        : print and run a shell command, reporting failures
- paths      : path normalisation and program identification

"""
