"""
Run Package

Configuration, training trials and multi-trial experiments.

Exported:
    Config:            INI based configuration
    Trial:             Abstract training run
    SupervisedTrial:   Training run of a supervised algorithm
    UnsupervisedTrial: Training run of an unsupervised algorithm
    Experiment:        Collection of independent trials
    build_network, build_selection, build_learning: Factories driven by a Config
"""

from neuroforge.run.config     import Config
from neuroforge.run.trial      import (Trial, SupervisedTrial, UnsupervisedTrial,
                                       build_network, build_selection, build_learning)
from neuroforge.run.experiment import Experiment

__all__ = [
    'Config',
    'Trial',
    'SupervisedTrial',
    'UnsupervisedTrial',
    'Experiment',
    'build_network',
    'build_selection',
    'build_learning',
]
