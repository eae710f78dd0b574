from functools import reduce


def pipe(data, *functions):
    """管道操作"""
    return reduce(lambda x, f: f(x), functions, data)
