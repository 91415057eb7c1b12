"""
sxl - report the latest and next scheduled SpaceX launches.

Launch, payload and launchpad records are read from the public SpaceX REST API
(https://github.com/r-spacex/SpaceX-API), merged into one record per launch
and printed as a text report.
"""

__version__ = "0.6.0"
__license__ = "MIT"
