"""Helper functions to compute the responses of basis functions and line segments,
and to generate the regular input grids these responses are sampled on."""
import numpy as np
from scipy.spatial.distance import cdist


def generateInputsGrid(min, max, n_samples_per_dim):
    """Generates a regular grid of input points.

    The first dimension varies slowest, i.e. for min=[0,0], max=[1,1] and
    n_samples_per_dim=[2,2] the rows are [0,0], [0,1], [1,0], [1,1].
    A dimension with only one sample is sampled at its minimum.

    :param min: minimum values for the grid, one for each dimension
    :type min: numpy array, 1d
    :param max: maximum values for the grid, one for each dimension
    :type max: numpy array, 1d
    :param n_samples_per_dim: number of samples along each dimension
    :type n_samples_per_dim: numpy array of ints, 1d
    :return: grid points, one per row
    :rtype: numpy array, shape (prod(n_samples_per_dim), n_dims)
    """
    min = np.atleast_1d(np.asarray(min, dtype=float))
    max = np.atleast_1d(np.asarray(max, dtype=float))
    n_samples_per_dim = np.atleast_1d(np.asarray(n_samples_per_dim, dtype=int))

    axes = []
    for i in range(len(n_samples_per_dim)):
        if n_samples_per_dim[i] == 1:
            axes.append(np.array([min[i]]))
        else:
            axes.append(np.linspace(min[i], max[i], n_samples_per_dim[i]))

    mesh = np.meshgrid(*axes, indexing="ij")
    return np.column_stack([m.ravel() for m in mesh])


def gaussianKernelActivations(centers, widths, inputs, normalized=False):
    """Computes the activations of axis-aligned Gaussian kernels.

    :param centers: kernel centers
    :type centers: numpy array, shape (n_basis, n_dims)
    :param widths: kernel widths (standard deviations)
    :type widths: numpy array, shape (n_basis, n_dims)
    :param inputs: input points
    :type inputs: numpy array, shape (n_samples, n_dims)
    :param normalized: whether the activations of each sample should sum to one
    :type normalized: bool, optional
    :return: activations
    :rtype: numpy array, shape (n_samples, n_basis)
    """
    centers = np.atleast_2d(centers)
    widths = np.atleast_2d(widths)
    inputs = np.atleast_2d(inputs)

    # (n_samples, n_basis, n_dims)
    scaled = (inputs[:, np.newaxis, :] - centers[np.newaxis, :, :]) / widths[np.newaxis, :, :]
    activations = np.exp(-0.5 * np.sum(scaled**2, axis=2))

    if normalized:
        sums = np.sum(activations, axis=1, keepdims=True)
        # far away from all centers every kernel underflows to zero
        sums[sums == 0] = 1.0
        activations = activations / sums

    return activations


def linesResponse(slopes, offsets, inputs):
    """Evaluates one line (hyperplane) per basis function at each input.

    :param slopes: slopes of the lines
    :type slopes: numpy array, shape (n_basis, n_dims)
    :param offsets: offsets of the lines
    :type offsets: numpy array, shape (n_basis,)
    :param inputs: input points
    :type inputs: numpy array, shape (n_samples, n_dims)
    :return: line values
    :rtype: numpy array, shape (n_samples, n_basis)
    """
    inputs = np.atleast_2d(inputs)
    return inputs @ np.atleast_2d(slopes).T + np.asarray(offsets)[np.newaxis, :]


def squaredExponentialCovariance(inputs, centers, max_covar, length_scales):
    """Squared exponential covariance between each input and each center.

    k(x, c) = max_covar * exp(-0.5 * sum_d ((x_d - c_d)/l_d)^2)
    """
    length_scales = np.asarray(length_scales, dtype=float)
    distances = cdist(np.atleast_2d(inputs) / length_scales,
                      np.atleast_2d(centers) / length_scales,
                      "sqeuclidean")
    return max_covar * np.exp(-0.5 * distances)
