# major, minor, patch, build, meta, status
VERSION = (1, 0, 0, 0, 'ats', 'stable')
