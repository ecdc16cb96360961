import os
import tqdm
import typing

from torch.utils.tensorboard import SummaryWriter

class Logger:
    """
    Logger of search and scramble runs.
    Messages are written through tqdm progress bar and optionally appended to log file,
    scalars are written to tensorboard.

    Parameters
    ----------
    `log_dir` : str
        directory for log file and tensorboard events
    `log_filename` : str
        name of log file, no file logging if empty
    `clear` : bool
        whether clear log file on start
    `pbar` : tqdm, optional
        progress bar to write messages and count search expansions
    `use_tensorboard` : bool
        whether initialize SummaryWriter for tensorboard logging
    `purge_step` : int
        purge_step parameter for SummaryWriter
    `filename_suffix` : str
        filename_suffix parameter for SummaryWriter
    """
    def __init__(self, log_dir : str = '', log_filename : str = '', clear : bool = False, pbar : tqdm.tqdm = None, use_tensorboard : bool = False, purge_step : int = None, filename_suffix : str = ''):
        self.pbar     = pbar
        self.path     = log_dir
        self.filename = log_filename
        self.filepath = os.path.join(log_dir, log_filename) if log_filename else ''
        self.use_tensorboard = use_tensorboard
        self.sw = None
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if self.filepath and clear:
            open(self.filepath, 'w').close()
        if use_tensorboard:
            self.sw = SummaryWriter(log_dir or None, purge_step=purge_step, filename_suffix=filename_suffix)

    def tqdmlog(self, message : str, pbar : tqdm.tqdm = None, to_file : bool = False, attention : bool = False, add_iter_num : bool = False):
        """
        Log message using tqdm progress bar

        Parameters
        ----------
        `message` : str
            Message to log
        `pbar` : tqdm, optional
            tqdm progress bar to write, used when logger has no own progress bar
        `to_file` : bool, optional
            whether save log message in file
        `attention` : bool, optional
            whether surround message with lines of '=' signs
        `add_iter_num` : bool, optional
            whether add progress bar counter as prefix of message
        """
        pbar = pbar if self.pbar is None else self.pbar
        if add_iter_num and pbar is not None:
            message = f'{pbar.n:5} | {message}'
        if to_file:
            self.filelog(message)
        lines = [message]
        if attention:
            lines = ['='*len(message), message, '='*len(message)]
        for line in lines:
            if pbar is not None:
                pbar.write(line)
            else:
                tqdm.tqdm.write(line)

    def filelog(self, message : str, filepath : str = None):
        """
        Append message to file

        Parameters
        ----------
        `message` : str
            message to log
        `filepath`: str
            Path to file, log file of the logger by default
        """
        filepath = filepath if filepath is not None else self.filepath
        if filepath:
            with open(filepath, 'a') as f:
                f.write(message + '\n')

    def tblog(self, tag : str, value : typing.Any, step : int, sw : SummaryWriter = None):
        """
        Log scalar to tensorboard. Nothing is logged without SummaryWriter.

        Parameters
        ----------
        `tag` : str
            see `add_scalar` summary writer method
        `value` : Any
            see `add_scalar` summary writer method
        `step` : int
            see `add_scalar` summary writer method
        `sw` : SummaryWriter, optional
            SummaryWriter to use instead of the logger's own one
        """
        sw = sw if sw is not None else self.sw
        if sw is not None:
            sw.add_scalar(tag, value, step)

    def close(self):
        """
        Close progress bar and SummaryWriter
        """
        if self.pbar is not None:
            self.pbar.close()
        if self.sw is not None:
            self.sw.close()
