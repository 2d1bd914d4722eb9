#!/usr/bin/env python

import timeit
from setuptools import setup, Command

cmdclass = {}

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for params in ["Params1024", "Params1536", "Params2048",
                       "Params3072", "Params4096"]:
            S1 = "from srp6a import SRPClient, SRPServer, derive, %s" % params
            S2 = "s = b'salt'; _, v = derive(b'user', s, b'password', %s)" % params
            S3 = "c = SRPClient(b'user', b'password', params=%s)" % params
            S4 = "srv = SRPServer(b'user', s, v, params=%s)" % params
            S5 = "A = c.start(); salt, B = srv.start()"
            S6 = "M1 = c.process_challenge(salt, B)"
            S7 = "c.verify_server(srv.verify_client(A, M1))"

            full = do([S1, S2], ";".join([S3, S4, S5, S6, S7]))
            start = do([S1, S2], ";".join([S3, S4, S5]))
            from srp6a import params as all_params
            p = getattr(all_params, params)
            msglen = p.group.element_size_bytes
            print("%-10s: msglen=%3d, full=%6s, start=%6s"
                  % (params, msglen, abbrev(full), abbrev(start)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      python_requires=">=3.6",
      install_requires=["hkdf"],
      extras_require={"test": ["pytest"]},
      )
