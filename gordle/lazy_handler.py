import os
import glob
import tempfile
from logging.handlers import RotatingFileHandler


class LazyRotatingFileHandler(RotatingFileHandler):
    """
    Rotating log file kept in a private temporary directory.

    An existing directory matching `tmpdir_prefix` is reused when it is owned
    by the current user, has 0o700 permissions and holds no symlinks;
    otherwise a new one is created. The file itself is only opened on the
    first record.
    """

    def __init__(self, tmpdir_prefix='', basename=None, *args, **kwargs):
        self.base_dir = self._create_temp_dir(tmpdir_prefix)
        kwargs['filename'] = os.path.join(self.base_dir, basename)
        kwargs.setdefault('delay', True)
        kwargs.setdefault('encoding', 'utf-8')
        super().__init__(*args, **kwargs)

    @staticmethod
    def _tmpdir_usable(path):
        st = os.stat(path)
        if st.st_uid != os.getuid() or (st.st_mode & 0o777) != 0o700:
            return False
        return not any(os.path.islink(os.path.join(path, item)) for item in os.listdir(path))

    @classmethod
    def _create_temp_dir(cls, tmpdir_prefix):
        if tmpdir_prefix:
            pattern = os.path.join(tempfile.gettempdir(), f"{glob.escape(tmpdir_prefix)}*")
            for dir_ in sorted(glob.glob(pattern)):
                if os.path.isdir(dir_) and not os.path.islink(dir_) and cls._tmpdir_usable(dir_):
                    return dir_

        # mkdtemp already creates the directory with 0o700
        return tempfile.mkdtemp(prefix=tmpdir_prefix)
