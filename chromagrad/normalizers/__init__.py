from .stop_normalizer import RejectReason, Rejected, normalize, build_gradient, iter_built_gradients

__all__ = ['RejectReason', 'Rejected', 'normalize', 'build_gradient', 'iter_built_gradients']
