from blockshuffle.runtime.pipeline import LoggingProgress, ShufflePipeline, ShuffleResult

__all__ = ['LoggingProgress', 'ShufflePipeline', 'ShuffleResult']
