def fibonacci(n):
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def create_test_report(test_name, status="pending", duration=0):
    return f"Test Report - Name: {test_name}, Status: {status}, Duration: {duration}ms"


def divide(a, b):
    return a / b
