from benchmarks.timer import Timer
