"""LinkUp candidate/job matching engine"""

__version__ = "1.0.0"
