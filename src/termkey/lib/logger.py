VERBOSE = False
FLUSH = True


def log(*args, ctx="--"):
    print(f"({ctx})", *args, flush=FLUSH)


def info(*args, ctx="--"):
    log(*args, ctx=ctx)


def warn(*args, ctx="WW"):
    log(*args, ctx=ctx)


def error(*args, ctx="EE"):
    log(*args, ctx=ctx)


def debug(*args, ctx="DD"):
    if not VERBOSE:
        return

    # allow blank lines without context
    if len(args) == 0:
        print("", flush=FLUSH)
        return
    log(*args, ctx=ctx)
