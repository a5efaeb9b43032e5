from labdb.util import db
from labdb.util import dates
